from uuid import UUID

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.photos.dtos import ModerationAction
from src.photos.features.gallery.router import PhotoResponse
from src.photos.features.moderate_photos.write_model import (
    PhotoModerationWriteModel,
    SqlPhotoModerationWriteModel,
)
from src.photos.urls import BULK_MODERATE_URL, MODERATE_PHOTO_URL, PHOTO_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class ModerationSubmit(BaseModel):
    action: ModerationAction


class BulkModerationSubmit(BaseModel):
    photo_ids: list[UUID]
    action: ModerationAction


class BulkModerationResponse(BaseModel):
    updated: int


def get_photo_moderation_write_model() -> PhotoModerationWriteModel:
    return SqlPhotoModerationWriteModel()


@router.post(BULK_MODERATE_URL, response_model=BulkModerationResponse)
async def bulk_moderate(
    request: BulkModerationSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: PhotoModerationWriteModel = Depends(get_photo_moderation_write_model),
) -> BulkModerationResponse:
    updated = await write_model.bulk_moderate(context, request.photo_ids, request.action)
    return BulkModerationResponse(updated=updated)


@router.post(MODERATE_PHOTO_URL, response_model=PhotoResponse)
async def moderate_photo(
    photo_id: UUID,
    request: ModerationSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: PhotoModerationWriteModel = Depends(get_photo_moderation_write_model),
) -> PhotoResponse:
    return PhotoResponse.from_dto(
        await write_model.moderate_photo(context, photo_id, request.action)
    )


@router.delete(PHOTO_URL, status_code=204)
async def delete_photo(
    photo_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: PhotoModerationWriteModel = Depends(get_photo_moderation_write_model),
) -> Response:
    await write_model.delete_photo(context, photo_id)
    return Response(status_code=204)
