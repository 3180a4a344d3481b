from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.exceptions import NotFound
from src.messaging.dtos import BroadcastDTO, MessageStatus
from src.messaging.features.list_broadcasts.read_model import (
    BroadcastReadModel,
    SqlBroadcastReadModel,
)
from src.messaging.urls import BROADCAST_URL, BROADCASTS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class BroadcastResponse(BaseModel):
    id: UUID
    subject: str
    content: str
    status: MessageStatus
    recipient_count: int
    cta_text: str | None = None
    cta_url: str | None = None
    scheduled_for: datetime | None = None
    sent_at: datetime | None = None
    error_message: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, message: BroadcastDTO) -> "BroadcastResponse":
        return cls(
            id=message.id,
            subject=message.subject,
            content=message.content,
            status=message.status,
            recipient_count=message.recipient_count,
            cta_text=message.cta_text,
            cta_url=message.cta_url,
            scheduled_for=message.scheduled_for,
            sent_at=message.sent_at,
            error_message=message.error_message,
            created_at=message.created_at,
        )


def get_broadcast_read_model() -> BroadcastReadModel:
    return SqlBroadcastReadModel()


@router.get(BROADCASTS_URL, response_model=list[BroadcastResponse])
async def list_broadcasts(
    context: TenantContext = Depends(get_tenant_context),
    read_model: BroadcastReadModel = Depends(get_broadcast_read_model),
) -> list[BroadcastResponse]:
    return [BroadcastResponse.from_dto(m) for m in await read_model.list_broadcasts(context)]


@router.get(BROADCAST_URL, response_model=BroadcastResponse)
async def get_broadcast(
    message_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    read_model: BroadcastReadModel = Depends(get_broadcast_read_model),
) -> BroadcastResponse:
    message = await read_model.get_broadcast(context, message_id)
    if message is None:
        raise NotFound("Message not found")
    return BroadcastResponse.from_dto(message)
