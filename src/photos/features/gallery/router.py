from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.photos.dtos import PhotoDTO, PhotoStatus
from src.photos.features.gallery.read_model import PhotoReadModel, SqlPhotoReadModel
from src.photos.urls import PHOTOS_URL, SITE_PHOTOS_URL
from src.tenants.dependencies import get_site
from src.tenants.dtos import TenantContext, WeddingSiteDTO

router = APIRouter()


class PublicPhotoResponse(BaseModel):
    id: UUID
    url: str
    uploader_name: str | None = None
    caption: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, photo: PhotoDTO) -> "PublicPhotoResponse":
        return cls(
            id=photo.id,
            url=photo.url,
            uploader_name=photo.uploader_name,
            caption=photo.caption,
            created_at=photo.created_at,
        )


class PhotoResponse(PublicPhotoResponse):
    status: PhotoStatus

    @classmethod
    def from_dto(cls, photo: PhotoDTO) -> "PhotoResponse":
        return cls(
            id=photo.id,
            url=photo.url,
            uploader_name=photo.uploader_name,
            caption=photo.caption,
            created_at=photo.created_at,
            status=photo.status,
        )


def get_photo_read_model() -> PhotoReadModel:
    return SqlPhotoReadModel()


@router.get(PHOTOS_URL, response_model=list[PhotoResponse])
async def list_photos(
    status: PhotoStatus | None = None,
    context: TenantContext = Depends(get_tenant_context),
    read_model: PhotoReadModel = Depends(get_photo_read_model),
) -> list[PhotoResponse]:
    return [PhotoResponse.from_dto(photo) for photo in await read_model.list_photos(context, status)]


@router.get(SITE_PHOTOS_URL, response_model=list[PublicPhotoResponse])
async def list_gallery_photos(
    site: WeddingSiteDTO = Depends(get_site),
    read_model: PhotoReadModel = Depends(get_photo_read_model),
) -> list[PublicPhotoResponse]:
    """Approved photos only. Empty while photo sharing is switched off."""
    if not site.photo_sharing_enabled:
        return []
    photos = await read_model.list_photos(site.context, PhotoStatus.APPROVED)
    return [PublicPhotoResponse.from_dto(photo) for photo in photos]
