import abc
from collections import defaultdict

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.events.dtos import RsvpStatus
from src.events.repository.orm_models import EventGuest
from src.guests.repository.orm_models import Guest
from src.seating.dtos import SeatedGuestDTO, SeatingChartDTO, TableDTO, TableWithGuestsDTO
from src.seating.repository.orm_models import SeatingTable
from src.seating.repository.queries import attending_plus_ones
from src.tenants.dtos import TenantContext


class SeatingChartReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_seating_chart(self, context: TenantContext) -> SeatingChartDTO:
        """Tables in display order with their guests, plus the unassigned pool.

        The pool holds guests attending at least one event who have no table.
        """
        raise NotImplementedError


class SqlSeatingChartReadModel(SeatingChartReadModel):
    async def get_seating_chart(self, context: TenantContext) -> SeatingChartDTO:
        async with async_session_manager() as session:
            tables = (
                await session.execute(
                    select(SeatingTable)
                    .where(SeatingTable.wedding_id == context.wedding_id)
                    .order_by(SeatingTable.order, SeatingTable.name)
                )
            ).scalars().all()

            attending = select(EventGuest.guest_id).where(
                EventGuest.rsvp_status == RsvpStatus.ATTENDING
            )
            guests = (
                await session.execute(
                    select(Guest)
                    .where(
                        Guest.wedding_id == context.wedding_id,
                        (Guest.table_id.is_not(None)) | (Guest.uuid.in_(attending)),
                    )
                    .order_by(func.lower(Guest.name), Guest.uuid)
                )
            ).scalars().all()
            plus_ones = await attending_plus_ones(session, [guest.uuid for guest in guests])

        seated = defaultdict(list)
        unassigned = []
        for guest in guests:
            entry = SeatedGuestDTO(
                id=guest.uuid, name=guest.name, plus_one_count=plus_ones.get(guest.uuid)
            )
            if guest.table_id is None:
                unassigned.append(entry)
            else:
                seated[guest.table_id].append(entry)

        return SeatingChartDTO(
            tables=[
                TableWithGuestsDTO(table=TableDTO.from_table(table), guests=seated[table.uuid])
                for table in tables
            ],
            unassigned_guests=unassigned,
        )
