from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.photos.dtos import PhotoStatus, clean_photo_input
from src.photos.features.gallery.router import PublicPhotoResponse
from src.photos.features.submit_photo.write_model import (
    PhotoSubmissionWriteModel,
    SqlPhotoSubmissionWriteModel,
)
from src.photos.urls import SITE_PHOTOS_URL
from src.tenants.dependencies import get_site
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


class PhotoSubmit(BaseModel):
    url: str
    uploader_name: str | None = None
    caption: str | None = None


class SubmittedPhotoResponse(PublicPhotoResponse):
    awaiting_approval: bool


def get_photo_submission_write_model() -> PhotoSubmissionWriteModel:
    return SqlPhotoSubmissionWriteModel()


@router.post(SITE_PHOTOS_URL, response_model=SubmittedPhotoResponse, status_code=201)
async def submit_photo(
    request: PhotoSubmit,
    site: WeddingSiteDTO = Depends(get_site),
    write_model: PhotoSubmissionWriteModel = Depends(get_photo_submission_write_model),
) -> SubmittedPhotoResponse:
    data = clean_photo_input(request.url, request.uploader_name, request.caption)
    photo = await write_model.submit_photo(site, data)
    return SubmittedPhotoResponse(
        **PublicPhotoResponse.from_dto(photo).model_dump(),
        awaiting_approval=photo.status is PhotoStatus.PENDING,
    )
