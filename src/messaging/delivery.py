"""Shared delivery of one broadcast to a list of recipients."""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.email_service import EmailDeliveryError, EmailServiceBase
from src.guests.repository.orm_models import Guest
from src.messaging.dtos import BroadcastInputDTO, MessageStatus, RecipientDTO

logger = logging.getLogger(__name__)


@dataclass
class DeliveryReport:
    delivered: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def status(self) -> MessageStatus:
        return MessageStatus.FAILED if self.failures else MessageStatus.SENT

    @property
    def error_message(self) -> str | None:
        if not self.failures:
            return None
        return f"{len(self.failures)} of {self.delivered + len(self.failures)} emails failed: " + (
            "; ".join(self.failures[:5])
        )


async def load_recipients(session: AsyncSession, wedding_id: UUID) -> list[RecipientDTO]:
    """Every guest of the wedding that has an email address."""
    result = await session.execute(
        select(Guest.name, Guest.email)
        .where(Guest.wedding_id == wedding_id, Guest.email.is_not(None), Guest.email != "")
        .order_by(Guest.name)
    )
    return [RecipientDTO(name=name, email=email) for name, email in result.all()]


async def deliver_broadcast(
    email_service: EmailServiceBase,
    recipients: list[RecipientDTO],
    couple_names: str,
    message: BroadcastInputDTO,
) -> DeliveryReport:
    report = DeliveryReport()
    for recipient in recipients:
        try:
            await email_service.send_broadcast(
                to_address=recipient.email,
                guest_name=recipient.name,
                couple_names=couple_names,
                subject=message.subject,
                content=message.content,
                cta_text=message.cta_text,
                cta_url=message.cta_url,
            )
        except EmailDeliveryError as e:
            logger.exception("Broadcast delivery to %s failed", recipient.email)
            report.failures.append(f"{recipient.email}: {e}")
            continue
        report.delivered += 1
    return report
