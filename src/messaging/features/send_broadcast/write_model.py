import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service import EmailServiceBase
from src.exceptions import TransientFailure, ValidationError
from src.messaging.delivery import deliver_broadcast, load_recipients
from src.messaging.dtos import BroadcastDTO, BroadcastInputDTO, MessageStatus
from src.messaging.repository.orm_models import BroadcastMessage
from src.models.base import utcnow
from src.tenants.dtos import WeddingSiteDTO

logger = logging.getLogger(__name__)


class SendBroadcastWriteModel(ABC):
    @abstractmethod
    async def send_broadcast(self, site: WeddingSiteDTO, data: BroadcastInputDTO) -> BroadcastDTO:
        """Email every guest with an address right away and record the message.

        The message is stored as SENT, or as FAILED with the error when any
        delivery failed, in which case TransientFailure is raised after the
        record is saved.
        """
        raise NotImplementedError


class SqlSendBroadcastWriteModel(SendBroadcastWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        email_service: EmailServiceBase,
        session_overwrite: AsyncSession | None = None,
    ) -> None:
        self.email_service = email_service
        self.session_overwrite = session_overwrite

    async def send_broadcast(self, site: WeddingSiteDTO, data: BroadcastInputDTO) -> BroadcastDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            recipients = await load_recipients(session, site.wedding_id)
            if not recipients:
                raise ValidationError("No guests with email addresses found")

            report = await deliver_broadcast(
                self.email_service, recipients, site.couple_names, data
            )
            message = BroadcastMessage(
                wedding_id=site.wedding_id,
                subject=data.subject,
                content=data.content,
                cta_text=data.cta_text,
                cta_url=data.cta_url,
                status=report.status,
                sent_at=utcnow(),
                recipient_count=report.delivered,
                error_message=report.error_message,
            )
            session.add(message)
            await session.flush()
            broadcast = BroadcastDTO.from_message(message)

        if broadcast.status is MessageStatus.FAILED:
            logger.error("Broadcast %s failed: %s", broadcast.id, broadcast.error_message)
            raise TransientFailure("Failed to send emails")
        logger.info("Broadcast %s sent to %d guests", broadcast.id, broadcast.recipient_count)
        return broadcast
