"""Tests for SqlVisibleEventsReadModel. Data is committed under a fresh wedding per test."""

from datetime import datetime, timedelta, timezone

from src.email_service.tests.fakes import RecordingEmailService
from src.events.dtos import EventInputDTO
from src.events.features.invitations.write_model import SqlInvitationWriteModel
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.events.features.visible_events.read_model import SqlVisibleEventsReadModel
from src.guests.dtos import GuestInputDTO
from src.guests.features.manage_guests.write_model import SqlGuestWriteModel

START = datetime(2026, 6, 13, 14, 0, tzinfo=timezone.utc)


async def test_private_events_only_for_invited_guests(committed_site):
    context = committed_site.context
    events = SqlEventWriteModel()
    ceremony = await events.create_event(context, EventInputDTO(name="Ceremony", date_time=START))
    dinner = await events.create_event(
        context,
        EventInputDTO(name="Family dinner", date_time=START - timedelta(days=1), is_public=False),
    )
    guests = SqlGuestWriteModel()
    family = await guests.create_guest(context, GuestInputDTO(name="Grandma"))
    friend = await guests.create_guest(context, GuestInputDTO(name="Friend"))
    await SqlInvitationWriteModel(RecordingEmailService()).invite_guests(
        context, dinner.id, [family.id]
    )
    read_model = SqlVisibleEventsReadModel()

    anonymous = await read_model.get_visible_events(context)
    for_family = await read_model.get_visible_events(context, family.id)
    for_friend = await read_model.get_visible_events(context, friend.id)

    assert [e.id for e in anonymous] == [ceremony.id]
    assert [e.id for e in for_family] == [ceremony.id, dinner.id]
    assert [e.id for e in for_friend] == [ceremony.id]
