from datetime import datetime, timedelta, timezone

import pytest

from src.email_service.tests.fakes import RecordingEmailService
from src.events.dtos import EventInputDTO, RsvpStatus
from src.events.features.invitations.write_model import SqlInvitationWriteModel
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.exceptions import TransientFailure
from src.guests.dtos import GuestInputDTO
from src.guests.features.manage_guests.write_model import SqlGuestWriteModel
from src.rsvp.dtos import RsvpSubmissionDTO
from src.rsvp.features.send_reminders.write_model import SqlReminderWriteModel
from src.rsvp.features.submit_rsvp.write_model import SqlRsvpWriteModel

CEREMONY_AT = datetime(2026, 6, 13, 14, 0, tzinfo=timezone.utc)


async def invite_everyone(session, site, guests):
    events = SqlEventWriteModel(session_overwrite=session)
    ceremony = await events.create_event(
        site.context, EventInputDTO(name="Ceremony", date_time=CEREMONY_AT)
    )
    dinner = await events.create_event(
        site.context, EventInputDTO(name="Dinner", date_time=CEREMONY_AT + timedelta(hours=5))
    )
    guest_model = SqlGuestWriteModel(session_overwrite=session)
    created = {}
    for name, email in guests:
        created[name] = await guest_model.create_guest(
            site.context, GuestInputDTO(name=name, email=email)
        )
    invitations = SqlInvitationWriteModel(RecordingEmailService(), session_overwrite=session)
    guest_ids = [guest.id for guest in created.values()]
    await invitations.invite_guests(site.context, ceremony.id, guest_ids)
    await invitations.invite_guests(site.context, dinner.id, guest_ids)
    return ceremony, dinner, created


async def test_reminds_guests_with_pending_invitations(db_session, db_site):
    ceremony, dinner, guests = await invite_everyone(
        db_session,
        db_site,
        [("Alice", "alice@example.com"), ("Bob", "bob@example.com"), ("Carol", None)],
    )
    rsvps = SqlRsvpWriteModel(session_overwrite=db_session)
    for event in (ceremony, dinner):
        await rsvps.submit_rsvp(
            db_site.context,
            guests["Bob"].id,
            RsvpSubmissionDTO(event_id=event.id, rsvp_status=RsvpStatus.DECLINED),
        )
    await rsvps.submit_rsvp(
        db_site.context,
        guests["Alice"].id,
        RsvpSubmissionDTO(event_id=ceremony.id, rsvp_status=RsvpStatus.ATTENDING),
    )
    email_service = RecordingEmailService()

    write_model = SqlReminderWriteModel(email_service, session_overwrite=db_session)

    sent = await write_model.send_rsvp_reminders(db_site)

    assert sent == 1
    assert email_service.recipients == ["alice@example.com"]
    assert "- Dinner" in email_service.sent[0]["text"]
    assert "- Ceremony" not in email_service.sent[0]["text"]
    assert f"{db_site.subdomain}." in email_service.sent[0]["text"]


async def test_failed_reminder_is_transient(db_session, db_site):
    await invite_everyone(
        db_session, db_site, [("Alice", "alice@example.com"), ("Bob", "bob@example.com")]
    )
    email_service = RecordingEmailService(failing={"bob@example.com"})
    write_model = SqlReminderWriteModel(email_service, session_overwrite=db_session)

    with pytest.raises(TransientFailure):
        await write_model.send_rsvp_reminders(db_site)

    assert email_service.recipients == ["alice@example.com"]
