"""Write model for a guest's RSVP to one event.

The guest's invitation row is overwritten in place, so answering twice
leaves a single row holding the latest answer.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import meal_options_from_json
from src.events.repository.orm_models import Event, EventGuest
from src.exceptions import NotFound, ValidationError
from src.guests.repository.orm_models import Guest
from src.models.base import utcnow
from src.rsvp.dtos import RsvpResponseDTO, RsvpSubmissionDTO
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class RsvpWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(
        self, context: TenantContext, guest_id: UUID, data: RsvpSubmissionDTO
    ) -> RsvpResponseDTO:
        """Record a guest's answer for one event.

        Raises:
            NotFound: the guest is not invited to the event
            ValidationError: the meal choice is not offered at the event
        """
        raise NotImplementedError


class SqlRsvpWriteModel(RsvpWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def submit_rsvp(
        self, context: TenantContext, guest_id: UUID, data: RsvpSubmissionDTO
    ) -> RsvpResponseDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventGuest, Event)
                .join(Event, Event.uuid == EventGuest.event_id)
                .join(Guest, Guest.uuid == EventGuest.guest_id)
                .where(
                    EventGuest.event_id == data.event_id,
                    EventGuest.guest_id == guest_id,
                    Event.wedding_id == context.wedding_id,
                    Guest.wedding_id == context.wedding_id,
                )
            )
            row = result.one_or_none()
            if row is None:
                raise NotFound("Event invitation not found")
            invitation, event = row

            if data.meal_choice is not None:
                option_ids = {option.id for option in meal_options_from_json(event.meal_options)}
                if data.meal_choice not in option_ids:
                    raise ValidationError(
                        field_errors={"meal_choice": "Please choose one of the meal options"}
                    )

            invitation.rsvp_status = data.rsvp_status
            invitation.rsvp_at = utcnow()
            invitation.plus_one_count = data.plus_one_count
            invitation.plus_one_name = data.plus_one_name
            invitation.meal_choice = data.meal_choice
            invitation.dietary_notes = data.dietary_notes
            await session.flush()

            logger.info(
                "Guest %s answered %s for event %s",
                guest_id,
                data.rsvp_status.value,
                data.event_id,
            )
            return RsvpResponseDTO.from_event_guest(invitation)
