from datetime import datetime
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.registry.dtos import GiftDTO, clean_gift_input
from src.registry.features.manage_gifts.read_model import GiftReadModel, SqlGiftReadModel
from src.registry.features.manage_gifts.write_model import GiftWriteModel, SqlGiftWriteModel
from src.registry.urls import GIFT_URL, GIFTS_URL, REORDER_GIFTS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class GiftSubmit(BaseModel):
    name: str
    target_amount: Decimal
    description: str | None = None
    image_url: str | None = None


class ReorderSubmit(BaseModel):
    ordered_ids: list[UUID]


class GiftResponse(BaseModel):
    id: UUID
    name: str
    target_amount: Decimal
    description: str | None = None
    image_url: str | None = None
    order: int
    is_claimed: bool
    claimed_by: str | None = None
    claimed_at: datetime | None = None

    @classmethod
    def from_dto(cls, gift: GiftDTO) -> "GiftResponse":
        return cls(
            id=gift.id,
            name=gift.name,
            target_amount=gift.target_amount,
            description=gift.description,
            image_url=gift.image_url,
            order=gift.order,
            is_claimed=gift.is_claimed,
            claimed_by=gift.claimed_by,
            claimed_at=gift.claimed_at,
        )


def get_gift_write_model() -> GiftWriteModel:
    return SqlGiftWriteModel()


def get_gift_read_model() -> GiftReadModel:
    return SqlGiftReadModel()


@router.get(GIFTS_URL, response_model=list[GiftResponse])
async def list_gifts(
    context: TenantContext = Depends(get_tenant_context),
    read_model: GiftReadModel = Depends(get_gift_read_model),
) -> list[GiftResponse]:
    return [GiftResponse.from_dto(gift) for gift in await read_model.list_gifts(context)]


@router.post(GIFTS_URL, response_model=GiftResponse, status_code=status.HTTP_201_CREATED)
async def create_gift(
    request: GiftSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GiftWriteModel = Depends(get_gift_write_model),
) -> GiftResponse:
    gift = await write_model.create_gift(context, clean_gift_input(**request.model_dump()))
    return GiftResponse.from_dto(gift)


@router.post(REORDER_GIFTS_URL, status_code=status.HTTP_204_NO_CONTENT)
async def reorder_gifts(
    request: ReorderSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GiftWriteModel = Depends(get_gift_write_model),
) -> Response:
    await write_model.reorder_gifts(context, request.ordered_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(GIFT_URL, response_model=GiftResponse)
async def update_gift(
    gift_id: UUID,
    request: GiftSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GiftWriteModel = Depends(get_gift_write_model),
) -> GiftResponse:
    gift = await write_model.update_gift(context, gift_id, clean_gift_input(**request.model_dump()))
    return GiftResponse.from_dto(gift)


@router.delete(GIFT_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_gift(
    gift_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GiftWriteModel = Depends(get_gift_write_model),
) -> Response:
    await write_model.delete_gift(context, gift_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
