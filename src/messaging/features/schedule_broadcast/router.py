from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.messaging.dtos import clean_broadcast_input
from src.messaging.features.list_broadcasts.router import BroadcastResponse
from src.messaging.features.schedule_broadcast.write_model import (
    ScheduleBroadcastWriteModel,
    SqlScheduleBroadcastWriteModel,
)
from src.messaging.urls import CANCEL_BROADCAST_URL, SCHEDULE_BROADCAST_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class ScheduleBroadcastSubmit(BaseModel):
    subject: str
    content: str
    scheduled_for: datetime
    cta_text: str | None = None
    cta_url: str | None = None


def get_schedule_broadcast_write_model() -> ScheduleBroadcastWriteModel:
    return SqlScheduleBroadcastWriteModel()


@router.post(
    SCHEDULE_BROADCAST_URL, response_model=BroadcastResponse, status_code=status.HTTP_201_CREATED
)
async def schedule_broadcast(
    request: ScheduleBroadcastSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: ScheduleBroadcastWriteModel = Depends(get_schedule_broadcast_write_model),
) -> BroadcastResponse:
    data = clean_broadcast_input(
        subject=request.subject,
        content=request.content,
        cta_text=request.cta_text,
        cta_url=request.cta_url,
    )
    message = await write_model.schedule_broadcast(context, data, request.scheduled_for)
    return BroadcastResponse.from_dto(message)


@router.post(CANCEL_BROADCAST_URL, response_model=BroadcastResponse)
async def cancel_broadcast(
    message_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: ScheduleBroadcastWriteModel = Depends(get_schedule_broadcast_write_model),
) -> BroadcastResponse:
    return BroadcastResponse.from_dto(await write_model.cancel_broadcast(context, message_id))
