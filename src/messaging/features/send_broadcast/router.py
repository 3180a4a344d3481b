from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.auth.dependencies import get_current_site
from src.email_service import get_email_service
from src.messaging.dtos import clean_broadcast_input
from src.messaging.features.list_broadcasts.router import BroadcastResponse
from src.messaging.features.send_broadcast.write_model import (
    SendBroadcastWriteModel,
    SqlSendBroadcastWriteModel,
)
from src.messaging.urls import SEND_BROADCAST_URL
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


class BroadcastSubmit(BaseModel):
    subject: str
    content: str
    cta_text: str | None = None
    cta_url: str | None = None


def get_send_broadcast_write_model() -> SendBroadcastWriteModel:
    return SqlSendBroadcastWriteModel(email_service=get_email_service())


@router.post(SEND_BROADCAST_URL, response_model=BroadcastResponse, status_code=status.HTTP_201_CREATED)
async def send_broadcast(
    request: BroadcastSubmit,
    site: WeddingSiteDTO = Depends(get_current_site),
    write_model: SendBroadcastWriteModel = Depends(get_send_broadcast_write_model),
) -> BroadcastResponse:
    data = clean_broadcast_input(**request.model_dump())
    return BroadcastResponse.from_dto(await write_model.send_broadcast(site, data))
