"""Dashboard aggregation over committed invitations."""

from datetime import datetime, timedelta, timezone

from src.email_service.tests.fakes import RecordingEmailService
from src.events.dtos import EventInputDTO, MealOptionDTO, RsvpStatus
from src.events.features.invitations.write_model import SqlInvitationWriteModel
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.guests.dtos import GuestInputDTO
from src.guests.features.manage_guests.write_model import SqlGuestWriteModel
from src.rsvp.dtos import RsvpSubmissionDTO
from src.rsvp.features.rsvp_dashboard.read_model import SqlRsvpDashboardReadModel
from src.rsvp.features.submit_rsvp.write_model import SqlRsvpWriteModel

CEREMONY_AT = datetime(2026, 6, 13, 14, 0, tzinfo=timezone.utc)


async def test_dashboard_stats(committed_site):
    context = committed_site.context
    events = SqlEventWriteModel()
    ceremony = await events.create_event(
        context, EventInputDTO(name="Ceremony", date_time=CEREMONY_AT)
    )
    dinner = await events.create_event(
        context, EventInputDTO(name="Dinner", date_time=CEREMONY_AT + timedelta(hours=5))
    )
    await events.update_meal_options(
        context, dinner.id, [MealOptionDTO(id="fish", name="Fish")]
    )
    guests = SqlGuestWriteModel()
    alice = await guests.create_guest(context, GuestInputDTO(name="Alice"))
    bob = await guests.create_guest(context, GuestInputDTO(name="bob"))
    carol = await guests.create_guest(context, GuestInputDTO(name="Carol"))
    invitations = SqlInvitationWriteModel(RecordingEmailService())
    await invitations.invite_guests(context, ceremony.id, [alice.id, bob.id, carol.id])
    await invitations.invite_guests(context, dinner.id, [alice.id])
    rsvps = SqlRsvpWriteModel()
    await rsvps.submit_rsvp(
        context,
        alice.id,
        RsvpSubmissionDTO(
            event_id=ceremony.id, rsvp_status=RsvpStatus.ATTENDING, plus_one_count=1
        ),
    )
    await rsvps.submit_rsvp(
        context,
        alice.id,
        RsvpSubmissionDTO(
            event_id=dinner.id, rsvp_status=RsvpStatus.ATTENDING, meal_choice="fish"
        ),
    )
    await rsvps.submit_rsvp(
        context,
        bob.id,
        RsvpSubmissionDTO(event_id=ceremony.id, rsvp_status=RsvpStatus.DECLINED),
    )
    read_model = SqlRsvpDashboardReadModel()

    stats = await read_model.get_rsvp_stats(context)
    per_event = await read_model.get_rsvp_stats_per_event(context)
    guest_list = await read_model.get_rsvp_guest_list(context)

    assert (stats.invited, stats.attending, stats.declined, stats.pending) == (4, 2, 1, 1)
    assert stats.headcount == 3
    assert stats.meal_counts == {"fish": 1}

    assert [item.event_name for item in per_event] == ["Ceremony", "Dinner"]
    assert per_event[0].stats.headcount == 2
    assert per_event[0].stats.pending == 1
    assert per_event[1].stats.invited == 1

    assert [guest.name for guest in guest_list] == ["Alice", "bob", "Carol"]
    assert [r.event_name for r in guest_list[0].event_responses] == ["Ceremony", "Dinner"]
    assert guest_list[1].event_responses[0].rsvp_status is RsvpStatus.DECLINED
    assert guest_list[2].event_responses[0].rsvp_status is None


async def test_empty_wedding(committed_site):
    read_model = SqlRsvpDashboardReadModel()

    stats = await read_model.get_rsvp_stats(committed_site.context)

    assert stats.invited == 0
    assert await read_model.get_rsvp_stats_per_event(committed_site.context) == []
    assert await read_model.get_rsvp_guest_list(committed_site.context) == []
