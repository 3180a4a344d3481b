"""Scheduled broadcasts.

A scheduled message waits as PENDING until the dispatcher picks it up or the
couple cancels it. Both transitions are conditional updates on
``status = PENDING``, so a message is either cancelled or sent, never both.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from functools import partial
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.config.settings import settings
from src.exceptions import Conflict, NotFound
from src.messaging.dtos import BroadcastDTO, BroadcastInputDTO, MessageStatus, validate_schedule
from src.messaging.repository.orm_models import BroadcastMessage
from src.models.base import utcnow
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class ScheduleBroadcastWriteModel(ABC):
    @abstractmethod
    async def schedule_broadcast(
        self,
        context: TenantContext,
        data: BroadcastInputDTO,
        scheduled_for: datetime,
        now: datetime | None = None,
    ) -> BroadcastDTO:
        """Store a PENDING broadcast, ``scheduled_for`` must be after now and within 30 days."""
        raise NotImplementedError

    @abstractmethod
    async def cancel_broadcast(self, context: TenantContext, message_id: UUID) -> BroadcastDTO:
        """Raises Conflict unless the message is still PENDING."""
        raise NotImplementedError


class SqlScheduleBroadcastWriteModel(ScheduleBroadcastWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def schedule_broadcast(
        self,
        context: TenantContext,
        data: BroadcastInputDTO,
        scheduled_for: datetime,
        now: datetime | None = None,
    ) -> BroadcastDTO:
        scheduled_for = validate_schedule(
            scheduled_for, now or utcnow(), settings.broadcast_max_schedule_days
        )
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            message = BroadcastMessage(
                wedding_id=context.wedding_id,
                subject=data.subject,
                content=data.content,
                cta_text=data.cta_text,
                cta_url=data.cta_url,
                status=MessageStatus.PENDING,
                scheduled_for=scheduled_for,
                recipient_count=0,
            )
            session.add(message)
            await session.flush()
            logger.info("Scheduled broadcast %s for %s", message.uuid, scheduled_for.isoformat())
            return BroadcastDTO.from_message(message)

    async def cancel_broadcast(self, context: TenantContext, message_id: UUID) -> BroadcastDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                update(BroadcastMessage)
                .where(
                    BroadcastMessage.uuid == message_id,
                    BroadcastMessage.wedding_id == context.wedding_id,
                    BroadcastMessage.status == MessageStatus.PENDING,
                )
                .values(status=MessageStatus.CANCELLED)
                .execution_options(synchronize_session=False)
            )
            message = (
                await session.execute(
                    select(BroadcastMessage)
                    .where(
                        BroadcastMessage.uuid == message_id,
                        BroadcastMessage.wedding_id == context.wedding_id,
                    )
                    .execution_options(populate_existing=True)
                )
            ).scalar_one_or_none()
            if message is None:
                raise NotFound("Message not found")
            if result.rowcount == 0:
                raise Conflict("Only pending messages can be cancelled")
            logger.info("Cancelled broadcast %s", message_id)
            return BroadcastDTO.from_message(message)
