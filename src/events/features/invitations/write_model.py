"""Write model for inviting guests to events and emailing the invitations.

An EventGuest row is the invitation itself; its RSVP fields stay empty until
the guest answers.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.config.settings import settings
from src.email_service import EmailDeliveryError, EmailServiceBase
from src.events.dtos import InvitationResultDTO
from src.events.repository.orm_models import Event, EventGuest
from src.exceptions import NotFound, ValidationError
from src.guests.repository.orm_models import Guest
from src.models.base import utcnow
from src.tenants.dtos import TenantContext, WeddingSiteDTO

logger = logging.getLogger(__name__)


class InvitationWriteModel(ABC):
    @abstractmethod
    async def invite_guests(
        self, context: TenantContext, event_id: UUID, guest_ids: list[UUID]
    ) -> int:
        """Invite guests to an event, already invited guests are left untouched.

        Returns the number of new invitations.
        """
        raise NotImplementedError

    @abstractmethod
    async def uninvite_guests(
        self, context: TenantContext, event_id: UUID, guest_ids: list[UUID]
    ) -> int:
        raise NotImplementedError

    @abstractmethod
    async def send_event_invitations(
        self,
        site: WeddingSiteDTO,
        event_id: UUID,
        guest_ids: list[UUID] | None = None,
        resend_to_all: bool = False,
    ) -> InvitationResultDTO:
        raise NotImplementedError


class SqlInvitationWriteModel(InvitationWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        email_service: EmailServiceBase,
        session_overwrite: AsyncSession | None = None,
    ) -> None:
        self.email_service = email_service
        self.session_overwrite = session_overwrite

    async def invite_guests(
        self, context: TenantContext, event_id: UUID, guest_ids: list[UUID]
    ) -> int:
        if not guest_ids:
            raise ValidationError(field_errors={"guest_ids": "Select at least one guest"})
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            await self._get_event(session, context, event_id)

            result = await session.execute(
                select(Guest.uuid).where(
                    Guest.uuid.in_(guest_ids), Guest.wedding_id == context.wedding_id
                )
            )
            wedding_guest_ids = set(result.scalars().all())
            if len(wedding_guest_ids) != len(set(guest_ids)):
                raise NotFound("Guest not found")

            result = await session.execute(
                select(EventGuest.guest_id).where(
                    EventGuest.event_id == event_id, EventGuest.guest_id.in_(guest_ids)
                )
            )
            already_invited = set(result.scalars().all())
            new_ids = wedding_guest_ids - already_invited
            session.add_all(EventGuest(event_id=event_id, guest_id=guest_id) for guest_id in new_ids)
            await session.flush()
        logger.info("Invited %d guests to event %s", len(new_ids), event_id)
        return len(new_ids)

    async def uninvite_guests(
        self, context: TenantContext, event_id: UUID, guest_ids: list[UUID]
    ) -> int:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            await self._get_event(session, context, event_id)
            result = await session.execute(
                delete(EventGuest).where(
                    EventGuest.event_id == event_id, EventGuest.guest_id.in_(guest_ids)
                )
            )
            return result.rowcount

    async def send_event_invitations(
        self,
        site: WeddingSiteDTO,
        event_id: UUID,
        guest_ids: list[UUID] | None = None,
        resend_to_all: bool = False,
    ) -> InvitationResultDTO:
        sent = skipped = failed = 0
        rsvp_url = settings.site_url(site.subdomain, "/rsvp")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, site.context, event_id)

            stmt = (
                select(EventGuest, Guest)
                .join(Guest, Guest.uuid == EventGuest.guest_id)
                .where(EventGuest.event_id == event_id, Guest.wedding_id == site.wedding_id)
            )
            if guest_ids:
                stmt = stmt.where(EventGuest.guest_id.in_(guest_ids))
            rows = (await session.execute(stmt)).all()

            for invitation, guest in rows:
                if not guest.email or (invitation.invitation_sent_at and not resend_to_all):
                    skipped += 1
                    continue
                try:
                    await self.email_service.send_invitation(
                        to_address=guest.email,
                        guest_name=guest.name,
                        couple_names=site.couple_names,
                        event_name=event.name,
                        event_date=event.date_time.strftime("%A, %B %d, %Y at %H:%M"),
                        event_location=event.location or "",
                        rsvp_url=rsvp_url,
                    )
                except EmailDeliveryError:
                    logger.exception("Could not send invitation to guest %s", guest.uuid)
                    failed += 1
                    continue
                invitation.invitation_sent_at = utcnow()
                sent += 1
            await session.flush()

        logger.info(
            "Event %s invitations: %d sent, %d skipped, %d failed", event_id, sent, skipped, failed
        )
        return InvitationResultDTO(sent=sent, skipped=skipped, failed=failed)

    async def _get_event(self, session, context: TenantContext, event_id: UUID) -> Event:
        result = await session.execute(
            select(Event).where(Event.uuid == event_id, Event.wedding_id == context.wedding_id)
        )
        event = result.scalar_one_or_none()
        if event is None:
            raise NotFound("Event not found")
        return event
