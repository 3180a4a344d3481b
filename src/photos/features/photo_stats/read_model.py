import abc

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.photos.dtos import PhotoStatsDTO, PhotoStatus
from src.photos.repository.orm_models import GuestPhoto
from src.tenants.dtos import TenantContext


class PhotoStatsReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_photo_stats(self, context: TenantContext) -> PhotoStatsDTO:
        raise NotImplementedError


class SqlPhotoStatsReadModel(PhotoStatsReadModel):
    async def get_photo_stats(self, context: TenantContext) -> PhotoStatsDTO:
        async with async_session_manager() as session:
            rows = await session.execute(
                select(GuestPhoto.status, func.count(GuestPhoto.uuid))
                .where(GuestPhoto.wedding_id == context.wedding_id)
                .group_by(GuestPhoto.status)
            )
            counts = {PhotoStatus(status): count for status, count in rows.all()}
        return PhotoStatsDTO(
            pending=counts.get(PhotoStatus.PENDING, 0),
            approved=counts.get(PhotoStatus.APPROVED, 0),
            rejected=counts.get(PhotoStatus.REJECTED, 0),
        )
