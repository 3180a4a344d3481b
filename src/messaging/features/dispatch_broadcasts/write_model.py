"""
Dispatcher for scheduled broadcasts, run periodically (``cli.py
dispatch-broadcasts`` from cron).

Each due message is handled in its own transaction: the row is locked while
still PENDING, delivered, and written once as SENT or FAILED. A concurrent
cancel waits on the row lock and then finds the message no longer PENDING.
There are no retries.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service import EmailServiceBase
from src.messaging.delivery import DeliveryReport, deliver_broadcast, load_recipients
from src.messaging.dtos import BroadcastDTO, BroadcastInputDTO, MessageStatus
from src.messaging.repository.orm_models import BroadcastMessage
from src.models.base import as_utc, utcnow
from src.tenants.repository.orm_models import Wedding

logger = logging.getLogger(__name__)

NO_RECIPIENTS = "No guests with email addresses found"


class DispatchBroadcastsWriteModel(ABC):
    @abstractmethod
    async def dispatch_due_broadcasts(self, now: datetime | None = None) -> list[BroadcastDTO]:
        """Send every PENDING broadcast scheduled at or before ``now``."""
        raise NotImplementedError


class SqlDispatchBroadcastsWriteModel(DispatchBroadcastsWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        email_service: EmailServiceBase,
        session_overwrite: AsyncSession | None = None,
    ) -> None:
        self.email_service = email_service
        self.session_overwrite = session_overwrite

    async def dispatch_due_broadcasts(self, now: datetime | None = None) -> list[BroadcastDTO]:
        now = as_utc(now) if now else utcnow()
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            due_ids = (
                await session.execute(
                    select(BroadcastMessage.uuid)
                    .where(
                        BroadcastMessage.status == MessageStatus.PENDING,
                        BroadcastMessage.scheduled_for <= now,
                    )
                    .order_by(BroadcastMessage.scheduled_for)
                )
            ).scalars().all()

        dispatched = []
        for message_id in due_ids:
            broadcast = await self._dispatch_one(message_id, now)
            if broadcast is None:
                logger.info("Broadcast %s was cancelled or dispatched elsewhere", message_id)
                continue
            dispatched.append(broadcast)
        return dispatched

    async def _dispatch_one(self, message_id, now: datetime) -> BroadcastDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            row = (
                await session.execute(
                    select(BroadcastMessage, Wedding)
                    .join(Wedding, Wedding.uuid == BroadcastMessage.wedding_id)
                    .where(
                        BroadcastMessage.uuid == message_id,
                        BroadcastMessage.status == MessageStatus.PENDING,
                    )
                    .with_for_update(skip_locked=True, of=BroadcastMessage)
                    .execution_options(populate_existing=True)
                )
            ).one_or_none()
            if row is None:
                return None
            message, wedding = row

            recipients = await load_recipients(session, wedding.uuid)
            if recipients:
                report = await deliver_broadcast(
                    self.email_service,
                    recipients,
                    wedding.couple_names,
                    BroadcastInputDTO(
                        subject=message.subject,
                        content=message.content,
                        cta_text=message.cta_text,
                        cta_url=message.cta_url,
                    ),
                )
            else:
                report = DeliveryReport(failures=[NO_RECIPIENTS])

            message.status = report.status
            message.sent_at = now
            message.recipient_count = report.delivered
            message.error_message = NO_RECIPIENTS if not recipients else report.error_message
            await session.flush()

            if message.status is MessageStatus.FAILED:
                logger.error("Scheduled broadcast %s failed: %s", message_id, message.error_message)
            else:
                logger.info(
                    "Scheduled broadcast %s sent to %d guests", message_id, message.recipient_count
                )
            return BroadcastDTO.from_message(message)
