import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.config.settings import settings
from src.email_service import EmailDeliveryError, EmailServiceBase
from src.events.repository.orm_models import Event, EventGuest
from src.exceptions import TransientFailure
from src.guests.repository.orm_models import Guest
from src.tenants.dtos import WeddingSiteDTO

logger = logging.getLogger(__name__)


class ReminderWriteModel(ABC):
    @abstractmethod
    async def send_rsvp_reminders(self, site: WeddingSiteDTO) -> int:
        """Email every guest with an address and at least one unanswered invitation.

        Returns the number of reminders sent. Raises TransientFailure when
        any delivery fails.
        """
        raise NotImplementedError


class SqlReminderWriteModel(ReminderWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        email_service: EmailServiceBase,
        session_overwrite: AsyncSession | None = None,
    ) -> None:
        self.email_service = email_service
        self.session_overwrite = session_overwrite

    async def send_rsvp_reminders(self, site: WeddingSiteDTO) -> int:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            rows = (
                await session.execute(
                    select(Guest, Event.name)
                    .join(EventGuest, EventGuest.guest_id == Guest.uuid)
                    .join(Event, Event.uuid == EventGuest.event_id)
                    .where(
                        Guest.wedding_id == site.wedding_id,
                        Guest.email.is_not(None),
                        EventGuest.rsvp_status.is_(None),
                    )
                    .order_by(Guest.name, Event.date_time)
                )
            ).all()

        guests = {}
        pending_events = defaultdict(list)
        for guest, event_name in rows:
            guests[guest.uuid] = guest
            pending_events[guest.uuid].append(event_name)

        rsvp_url = settings.site_url(site.subdomain, "/rsvp")
        sent = failed = 0
        for guest_id, guest in guests.items():
            try:
                await self.email_service.send_reminder(
                    to_address=guest.email,
                    guest_name=guest.name,
                    couple_names=site.couple_names,
                    pending_events=pending_events[guest_id],
                    rsvp_url=rsvp_url,
                )
            except EmailDeliveryError:
                logger.exception("Could not send RSVP reminder to guest %s", guest_id)
                failed += 1
                continue
            sent += 1

        logger.info("Sent %d RSVP reminders for %s, %d failed", sent, site.subdomain, failed)
        if failed:
            raise TransientFailure("Failed to send reminder emails")
        return sent
