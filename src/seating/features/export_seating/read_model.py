import abc
from dataclasses import dataclass

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.events.dtos import RsvpStatus
from src.events.repository.orm_models import Event, EventGuest
from src.guests.repository.orm_models import Guest
from src.seating.capacity import seat_weight
from src.seating.repository.orm_models import SeatingTable
from src.seating.repository.queries import attending_plus_ones
from src.tenants.dtos import TenantContext


@dataclass(frozen=True)
class SeatingExportRowDTO:
    table_name: str
    guest_name: str
    party_name: str | None
    headcount: int
    meal_choice: str | None
    dietary_notes: str | None


class SeatingExportReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_export_rows(self, context: TenantContext) -> list[SeatingExportRowDTO]:
        """One row per seated guest, tables in display order."""
        raise NotImplementedError


class SqlSeatingExportReadModel(SeatingExportReadModel):
    async def get_export_rows(self, context: TenantContext) -> list[SeatingExportRowDTO]:
        async with async_session_manager() as session:
            seated = (
                await session.execute(
                    select(SeatingTable.name, Guest)
                    .join(Guest, Guest.table_id == SeatingTable.uuid)
                    .where(SeatingTable.wedding_id == context.wedding_id)
                    .order_by(SeatingTable.order, SeatingTable.uuid, func.lower(Guest.name))
                )
            ).all()
            guest_ids = [guest.uuid for _, guest in seated]
            plus_ones = await attending_plus_ones(session, guest_ids)

            # meal and dietary notes come from the guest's earliest attended event
            answers = {}
            if guest_ids:
                invitations = await session.execute(
                    select(EventGuest.guest_id, EventGuest.meal_choice, EventGuest.dietary_notes)
                    .join(Event, Event.uuid == EventGuest.event_id)
                    .where(
                        EventGuest.guest_id.in_(guest_ids),
                        EventGuest.rsvp_status == RsvpStatus.ATTENDING,
                    )
                    .order_by(Event.date_time)
                )
                for guest_id, meal_choice, dietary_notes in invitations.all():
                    answers.setdefault(guest_id, (meal_choice, dietary_notes))

        return [
            SeatingExportRowDTO(
                table_name=table_name,
                guest_name=guest.name,
                party_name=guest.party_name,
                headcount=seat_weight(plus_ones.get(guest.uuid)),
                meal_choice=answers.get(guest.uuid, (None, None))[0],
                dietary_notes=answers.get(guest.uuid, (None, None))[1],
            )
            for table_name, guest in seated
        ]
