import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.events.dtos import EventDTO
from src.events.repository.orm_models import Event, EventGuest
from src.guests.repository.orm_models import Guest
from src.rsvp.dtos import GuestEventDTO, GuestWithEventsDTO, RsvpResponseDTO
from src.tenants.dtos import TenantContext


class GuestRsvpReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_guest_with_events(
        self, context: TenantContext, guest_id: UUID
    ) -> GuestWithEventsDTO | None:
        """The guest and every event they are invited to, by date."""
        raise NotImplementedError


class SqlGuestRsvpReadModel(GuestRsvpReadModel):
    async def get_guest_with_events(
        self, context: TenantContext, guest_id: UUID
    ) -> GuestWithEventsDTO | None:
        async with async_session_manager() as session:
            guest = (
                await session.execute(
                    select(Guest).where(
                        Guest.uuid == guest_id, Guest.wedding_id == context.wedding_id
                    )
                )
            ).scalar_one_or_none()
            if guest is None:
                return None

            rows = (
                await session.execute(
                    select(EventGuest, Event)
                    .join(Event, Event.uuid == EventGuest.event_id)
                    .where(EventGuest.guest_id == guest.uuid)
                    .order_by(Event.date_time)
                )
            ).all()
            return GuestWithEventsDTO(
                id=guest.uuid,
                name=guest.name,
                allow_plus_one=guest.allow_plus_one,
                events=[
                    GuestEventDTO(
                        event=EventDTO.from_event(event),
                        current_rsvp=RsvpResponseDTO.from_event_guest(invitation),
                    )
                    for invitation, event in rows
                ],
            )
