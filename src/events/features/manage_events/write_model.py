"""Write model for the couple's events (ceremony, reception, brunch, ...)."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventDTO, EventInputDTO, MealOptionDTO
from src.events.repository.orm_models import Event, EventGuest
from src.exceptions import NotFound, ValidationError
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(self, context: TenantContext, data: EventInputDTO) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_event(
        self, context: TenantContext, event_id: UUID, data: EventInputDTO
    ) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, context: TenantContext, event_id: UUID) -> None:
        """Delete an event and every invitation to it."""
        raise NotImplementedError

    @abstractmethod
    async def reorder_events(self, context: TenantContext, ordered_ids: list[UUID]) -> None:
        raise NotImplementedError

    @abstractmethod
    async def update_meal_options(
        self, context: TenantContext, event_id: UUID, options: list[MealOptionDTO]
    ) -> EventDTO:
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(self, context: TenantContext, data: EventInputDTO) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            max_order = await session.scalar(
                select(func.max(Event.order)).where(Event.wedding_id == context.wedding_id)
            )
            event = Event(
                wedding_id=context.wedding_id,
                name=data.name,
                description=data.description,
                date_time=data.date_time,
                end_time=data.end_time,
                location=data.location,
                address=data.address,
                dress_code=data.dress_code,
                is_public=data.is_public,
                meal_options=[],
                order=(max_order or 0) + 1,
            )
            session.add(event)
            await session.flush()
            logger.info("Created event %s for wedding %s", event.uuid, context.wedding_id)
            return EventDTO.from_event(event)

    async def update_event(
        self, context: TenantContext, event_id: UUID, data: EventInputDTO
    ) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, context, event_id)
            event.name = data.name
            event.description = data.description
            event.date_time = data.date_time
            event.end_time = data.end_time
            event.location = data.location
            event.address = data.address
            event.dress_code = data.dress_code
            event.is_public = data.is_public
            await session.flush()
            return EventDTO.from_event(event)

    async def delete_event(self, context: TenantContext, event_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, context, event_id)
            await session.execute(delete(EventGuest).where(EventGuest.event_id == event.uuid))
            await session.delete(event)
            await session.flush()
        logger.info("Deleted event %s from wedding %s", event_id, context.wedding_id)

    async def reorder_events(self, context: TenantContext, ordered_ids: list[UUID]) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(Event).where(Event.wedding_id == context.wedding_id)
            )
            events = {event.uuid: event for event in result.scalars().all()}
            if set(ordered_ids) != set(events) or len(ordered_ids) != len(events):
                raise ValidationError(
                    field_errors={"ordered_ids": "Must list every event of the wedding exactly once"}
                )
            for position, event_id in enumerate(ordered_ids, start=1):
                events[event_id].order = position
            await session.flush()

    async def update_meal_options(
        self, context: TenantContext, event_id: UUID, options: list[MealOptionDTO]
    ) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, context, event_id)
            # reassign, JSON columns do not track in-place mutation
            event.meal_options = [option.to_json() for option in options]
            await session.flush()
            return EventDTO.from_event(event)

    async def _get_event(self, session, context: TenantContext, event_id: UUID) -> Event:
        result = await session.execute(
            select(Event).where(Event.uuid == event_id, Event.wedding_id == context.wedding_id)
        )
        event = result.scalar_one_or_none()
        if event is None:
            raise NotFound("Event not found")
        return event
