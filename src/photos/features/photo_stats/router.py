from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.photos.features.photo_stats.read_model import PhotoStatsReadModel, SqlPhotoStatsReadModel
from src.photos.urls import PHOTO_STATS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class PhotoStatsResponse(BaseModel):
    pending: int
    approved: int
    rejected: int
    total: int


def get_photo_stats_read_model() -> PhotoStatsReadModel:
    return SqlPhotoStatsReadModel()


@router.get(PHOTO_STATS_URL, response_model=PhotoStatsResponse)
async def get_photo_stats(
    context: TenantContext = Depends(get_tenant_context),
    read_model: PhotoStatsReadModel = Depends(get_photo_stats_read_model),
) -> PhotoStatsResponse:
    stats = await read_model.get_photo_stats(context)
    return PhotoStatsResponse(
        pending=stats.pending, approved=stats.approved, rejected=stats.rejected, total=stats.total
    )
