from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.events.dtos import RsvpStatus
from src.events.repository.orm_models import EventGuest


async def attending_plus_ones(session: AsyncSession, guest_ids: Iterable[UUID]) -> dict[UUID, int]:
    """Largest plus-one count per guest across their ATTENDING invitations.

    Guests without an ATTENDING invitation are missing from the result.
    """
    guest_ids = list(guest_ids)
    if not guest_ids:
        return {}
    result = await session.execute(
        select(EventGuest.guest_id, func.max(func.coalesce(EventGuest.plus_one_count, 0)))
        .where(
            EventGuest.guest_id.in_(guest_ids),
            EventGuest.rsvp_status == RsvpStatus.ATTENDING,
        )
        .group_by(EventGuest.guest_id)
    )
    return {guest_id: plus_ones for guest_id, plus_ones in result.all()}
