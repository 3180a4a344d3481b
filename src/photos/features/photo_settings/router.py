from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_current_site, get_tenant_context
from src.photos.dtos import PhotoSettingsDTO
from src.photos.features.photo_settings.write_model import (
    PhotoSettingsWriteModel,
    SqlPhotoSettingsWriteModel,
)
from src.photos.urls import PHOTO_SETTINGS_URL
from src.tenants.dtos import TenantContext, WeddingSiteDTO

router = APIRouter()


class PhotoSettingsSchema(BaseModel):
    photo_sharing_enabled: bool
    photo_moderation_required: bool


def get_photo_settings_write_model() -> PhotoSettingsWriteModel:
    return SqlPhotoSettingsWriteModel()


@router.get(PHOTO_SETTINGS_URL, response_model=PhotoSettingsSchema)
async def get_photo_settings(site: WeddingSiteDTO = Depends(get_current_site)) -> PhotoSettingsSchema:
    return PhotoSettingsSchema(
        photo_sharing_enabled=site.photo_sharing_enabled,
        photo_moderation_required=site.photo_moderation_required,
    )


@router.put(PHOTO_SETTINGS_URL, response_model=PhotoSettingsSchema)
async def update_photo_settings(
    request: PhotoSettingsSchema,
    context: TenantContext = Depends(get_tenant_context),
    write_model: PhotoSettingsWriteModel = Depends(get_photo_settings_write_model),
) -> PhotoSettingsSchema:
    settings = await write_model.update_photo_settings(
        context,
        PhotoSettingsDTO(
            photo_sharing_enabled=request.photo_sharing_enabled,
            photo_moderation_required=request.photo_moderation_required,
        ),
    )
    return PhotoSettingsSchema(
        photo_sharing_enabled=settings.photo_sharing_enabled,
        photo_moderation_required=settings.photo_moderation_required,
    )
