"""
Seat assignment.

The capacity check and the write happen in one transaction that starts by
writing to the destination table row. That write takes the row lock (and on
SQLite the database write lock) before occupancy is read, so two couples'
browsers dropping guests onto the same table cannot both squeeze in past the
capacity. A stale client-side check is only a hint.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import Conflict, NotFound
from src.guests.repository.orm_models import Guest
from src.models.base import utcnow
from src.seating.capacity import can_assign, seat_weight
from src.seating.repository.orm_models import SeatingTable
from src.seating.repository.queries import attending_plus_ones
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class SeatAssignmentWriteModel(ABC):
    @abstractmethod
    async def assign_guest_to_table(
        self, context: TenantContext, guest_id: UUID, table_id: UUID | None
    ) -> None:
        """Seat a guest at a table, or unassign them when ``table_id`` is None.

        Raises:
            NotFound: unknown guest or table
            Conflict: the guest and their plus-ones do not fit
        """
        raise NotImplementedError


class SqlSeatAssignmentWriteModel(SeatAssignmentWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def assign_guest_to_table(
        self, context: TenantContext, guest_id: UUID, table_id: UUID | None
    ) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            if table_id is not None:
                await self._lock_table(session, context, table_id)

            guest = (
                await session.execute(
                    select(Guest).where(
                        Guest.uuid == guest_id, Guest.wedding_id == context.wedding_id
                    )
                )
            ).scalar_one_or_none()
            if guest is None:
                raise NotFound("Guest not found")

            if table_id is None:
                guest.table_id = None
                await session.flush()
                return

            table = await session.get(SeatingTable, table_id)
            occupant_ids = (
                await session.execute(
                    select(Guest.uuid).where(Guest.table_id == table.uuid, Guest.uuid != guest.uuid)
                )
            ).scalars().all()
            plus_ones = await attending_plus_ones(session, [*occupant_ids, guest.uuid])

            incoming = seat_weight(plus_ones.get(guest.uuid))
            if not can_assign(table.capacity, incoming, [plus_ones.get(o) for o in occupant_ids]):
                logger.warning(
                    "Rejected seating guest %s at full table %s (capacity %d)",
                    guest.uuid,
                    table.uuid,
                    table.capacity,
                )
                raise Conflict("Table is at capacity")

            guest.table_id = table.uuid
            await session.flush()
        logger.info("Seated guest %s at table %s", guest_id, table_id)

    @staticmethod
    async def _lock_table(session: AsyncSession, context: TenantContext, table_id: UUID) -> None:
        result = await session.execute(
            update(SeatingTable)
            .where(SeatingTable.uuid == table_id, SeatingTable.wedding_id == context.wedding_id)
            .values(updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFound("Table not found")
