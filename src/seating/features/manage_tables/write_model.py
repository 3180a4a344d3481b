import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import NotFound, ValidationError
from src.guests.repository.orm_models import Guest
from src.seating.dtos import TableDTO, TableInputDTO
from src.seating.repository.orm_models import SeatingTable
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class TableWriteModel(ABC):
    @abstractmethod
    async def create_table(self, context: TenantContext, data: TableInputDTO) -> TableDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_table(
        self, context: TenantContext, table_id: UUID, data: TableInputDTO
    ) -> TableDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_table(self, context: TenantContext, table_id: UUID) -> None:
        """Delete a table, its guests go back to the unassigned pool."""
        raise NotImplementedError

    @abstractmethod
    async def reorder_tables(self, context: TenantContext, ordered_ids: list[UUID]) -> None:
        raise NotImplementedError


class SqlTableWriteModel(TableWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_table(self, context: TenantContext, data: TableInputDTO) -> TableDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            max_order = await session.scalar(
                select(func.max(SeatingTable.order)).where(
                    SeatingTable.wedding_id == context.wedding_id
                )
            )
            table = SeatingTable(
                wedding_id=context.wedding_id,
                name=data.name,
                capacity=data.capacity,
                order=(max_order or 0) + 1,
            )
            session.add(table)
            await session.flush()
            return TableDTO.from_table(table)

    async def update_table(
        self, context: TenantContext, table_id: UUID, data: TableInputDTO
    ) -> TableDTO:
        # capacity may drop below the current occupancy, the chart shows it as over capacity
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            table = await self._get_table(session, context, table_id)
            table.name = data.name
            table.capacity = data.capacity
            await session.flush()
            return TableDTO.from_table(table)

    async def delete_table(self, context: TenantContext, table_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            table = await self._get_table(session, context, table_id)
            await session.execute(
                update(Guest).where(Guest.table_id == table.uuid).values(table_id=None)
            )
            await session.delete(table)
            await session.flush()
        logger.info("Deleted table %s from wedding %s", table_id, context.wedding_id)

    async def reorder_tables(self, context: TenantContext, ordered_ids: list[UUID]) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(SeatingTable).where(SeatingTable.wedding_id == context.wedding_id)
            )
            tables = {table.uuid: table for table in result.scalars().all()}
            if set(ordered_ids) != set(tables) or len(ordered_ids) != len(tables):
                raise ValidationError(
                    field_errors={"ordered_ids": "Must list every table of the wedding exactly once"}
                )
            for position, table_id in enumerate(ordered_ids, start=1):
                tables[table_id].order = position
            await session.flush()

    async def _get_table(self, session, context: TenantContext, table_id: UUID) -> SeatingTable:
        result = await session.execute(
            select(SeatingTable).where(
                SeatingTable.uuid == table_id, SeatingTable.wedding_id == context.wedding_id
            )
        )
        table = result.scalar_one_or_none()
        if table is None:
            raise NotFound("Table not found")
        return table
