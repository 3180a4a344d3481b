import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.events.dtos import EventDTO
from src.events.repository.orm_models import Event
from src.tenants.dtos import TenantContext


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_events(self, context: TenantContext) -> list[EventDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_event(self, context: TenantContext, event_id: UUID) -> EventDTO | None:
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    async def list_events(self, context: TenantContext) -> list[EventDTO]:
        async with async_session_manager() as session:
            result = await session.execute(
                select(Event)
                .where(Event.wedding_id == context.wedding_id)
                .order_by(Event.order, Event.date_time)
            )
            return [EventDTO.from_event(event) for event in result.scalars().all()]

    async def get_event(self, context: TenantContext, event_id: UUID) -> EventDTO | None:
        async with async_session_manager() as session:
            result = await session.execute(
                select(Event).where(Event.uuid == event_id, Event.wedding_id == context.wedding_id)
            )
            event = result.scalar_one_or_none()
            return EventDTO.from_event(event) if event else None
