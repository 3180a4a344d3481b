import abc
from uuid import UUID

from sqlalchemy import or_, select

from src.config.database import async_session_manager
from src.events.dtos import EventDTO
from src.events.repository.orm_models import Event, EventGuest
from src.tenants.dtos import TenantContext


class VisibleEventsReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_visible_events(
        self, context: TenantContext, guest_id: UUID | None = None
    ) -> list[EventDTO]:
        """Public events, plus the private events ``guest_id`` is invited to."""
        raise NotImplementedError


class SqlVisibleEventsReadModel(VisibleEventsReadModel):
    async def get_visible_events(
        self, context: TenantContext, guest_id: UUID | None = None
    ) -> list[EventDTO]:
        async with async_session_manager() as session:
            visible = Event.is_public.is_(True)
            if guest_id is not None:
                invited = select(EventGuest.event_id).where(EventGuest.guest_id == guest_id)
                visible = or_(visible, Event.uuid.in_(invited))
            result = await session.execute(
                select(Event)
                .where(Event.wedding_id == context.wedding_id, visible)
                .order_by(Event.order, Event.date_time)
            )
            return [EventDTO.from_event(event) for event in result.scalars().all()]
