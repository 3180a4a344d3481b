"""Seating chart over committed data, one fresh wedding per test."""

from datetime import datetime, timezone

from src.email_service.tests.fakes import RecordingEmailService
from src.events.dtos import EventInputDTO, RsvpStatus
from src.events.features.invitations.write_model import SqlInvitationWriteModel
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.guests.dtos import GuestInputDTO
from src.guests.features.manage_guests.write_model import SqlGuestWriteModel
from src.rsvp.dtos import RsvpSubmissionDTO
from src.rsvp.features.submit_rsvp.write_model import SqlRsvpWriteModel
from src.seating.dtos import TableInputDTO
from src.seating.features.assign_guest.write_model import SqlSeatAssignmentWriteModel
from src.seating.features.manage_tables.write_model import SqlTableWriteModel
from src.seating.features.seating_chart.read_model import SqlSeatingChartReadModel


async def test_seating_chart(committed_site):
    context = committed_site.context
    event = await SqlEventWriteModel().create_event(
        context,
        EventInputDTO(name="Reception", date_time=datetime(2026, 6, 13, 18, tzinfo=timezone.utc)),
    )
    guests = SqlGuestWriteModel()
    alice = await guests.create_guest(context, GuestInputDTO(name="Alice"))
    bob = await guests.create_guest(context, GuestInputDTO(name="Bob"))
    carol = await guests.create_guest(context, GuestInputDTO(name="Carol"))
    await guests.create_guest(context, GuestInputDTO(name="Dave"))
    await SqlInvitationWriteModel(RecordingEmailService()).invite_guests(
        context, event.id, [alice.id, bob.id, carol.id]
    )
    rsvps = SqlRsvpWriteModel()
    for guest, status, plus_ones in [
        (alice, RsvpStatus.ATTENDING, 2),
        (bob, RsvpStatus.ATTENDING, None),
        (carol, RsvpStatus.DECLINED, None),
    ]:
        await rsvps.submit_rsvp(
            context,
            guest.id,
            RsvpSubmissionDTO(event_id=event.id, rsvp_status=status, plus_one_count=plus_ones),
        )
    tables = SqlTableWriteModel()
    head_table = await tables.create_table(context, TableInputDTO("Head table", 4))
    await tables.create_table(context, TableInputDTO("Table 2", 8))
    await SqlSeatAssignmentWriteModel().assign_guest_to_table(context, alice.id, head_table.id)

    chart = await SqlSeatingChartReadModel().get_seating_chart(context)

    assert [item.table.name for item in chart.tables] == ["Head table", "Table 2"]
    head = chart.tables[0]
    assert [guest.name for guest in head.guests] == ["Alice"]
    assert head.occupancy == 3
    assert chart.tables[1].guests == []
    assert [guest.name for guest in chart.unassigned_guests] == ["Bob"]
    assert chart.unassigned_guests[0].seat_weight == 1
