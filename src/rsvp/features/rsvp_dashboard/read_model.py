"""Read model behind the couple's RSVP dashboard.

Stats are folded from the invitation rows on every call, see
``src.rsvp.aggregation``.
"""

import abc
from collections import defaultdict

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.events.repository.orm_models import Event, EventGuest
from src.guests.repository.orm_models import Guest
from src.models.base import as_utc
from src.rsvp.aggregation import RsvpStats, aggregate_rsvps
from src.rsvp.dtos import EventResponseDTO, EventRsvpStatsDTO, RsvpGuestDTO
from src.tenants.dtos import TenantContext


class RsvpDashboardReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_rsvp_stats(self, context: TenantContext) -> RsvpStats:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_rsvp_stats_per_event(self, context: TenantContext) -> list[EventRsvpStatsDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_rsvp_guest_list(self, context: TenantContext) -> list[RsvpGuestDTO]:
        raise NotImplementedError


class SqlRsvpDashboardReadModel(RsvpDashboardReadModel):
    async def get_rsvp_stats(self, context: TenantContext) -> RsvpStats:
        async with async_session_manager() as session:
            result = await session.execute(
                select(EventGuest)
                .join(Event, Event.uuid == EventGuest.event_id)
                .where(Event.wedding_id == context.wedding_id)
            )
            return aggregate_rsvps(result.scalars().all())

    async def get_rsvp_stats_per_event(self, context: TenantContext) -> list[EventRsvpStatsDTO]:
        async with async_session_manager() as session:
            events = (
                await session.execute(
                    select(Event)
                    .where(Event.wedding_id == context.wedding_id)
                    .order_by(Event.date_time)
                )
            ).scalars().all()
            invitations = (
                await session.execute(
                    select(EventGuest).where(EventGuest.event_id.in_([e.uuid for e in events]))
                )
            ).scalars().all()

        by_event = defaultdict(list)
        for invitation in invitations:
            by_event[invitation.event_id].append(invitation)

        return [
            EventRsvpStatsDTO(
                event_id=event.uuid,
                event_name=event.name,
                event_date=as_utc(event.date_time),
                stats=aggregate_rsvps(by_event[event.uuid]),
            )
            for event in events
        ]

    async def get_rsvp_guest_list(self, context: TenantContext) -> list[RsvpGuestDTO]:
        async with async_session_manager() as session:
            guests = (
                await session.execute(
                    select(Guest)
                    .where(Guest.wedding_id == context.wedding_id)
                    .order_by(func.lower(Guest.name), Guest.uuid)
                )
            ).scalars().all()
            rows = (
                await session.execute(
                    select(EventGuest, Event.name)
                    .join(Event, Event.uuid == EventGuest.event_id)
                    .where(Event.wedding_id == context.wedding_id)
                    .order_by(Event.date_time)
                )
            ).all()

        responses = defaultdict(list)
        for invitation, event_name in rows:
            responses[invitation.guest_id].append(
                EventResponseDTO(
                    event_id=invitation.event_id,
                    event_name=event_name,
                    rsvp_status=invitation.rsvp_status,
                    plus_one_count=invitation.plus_one_count,
                    meal_choice=invitation.meal_choice,
                    dietary_notes=invitation.dietary_notes,
                )
            )

        return [
            RsvpGuestDTO(
                id=guest.uuid,
                name=guest.name,
                party_name=guest.party_name,
                email=guest.email,
                phone=guest.phone,
                event_responses=responses[guest.uuid],
            )
            for guest in guests
        ]
