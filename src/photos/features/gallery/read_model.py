import abc

from sqlalchemy import select

from src.config.database import async_session_manager
from src.photos.dtos import PhotoDTO, PhotoStatus
from src.photos.repository.orm_models import GuestPhoto
from src.tenants.dtos import TenantContext


class PhotoReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_photos(
        self, context: TenantContext, status: PhotoStatus | None = None
    ) -> list[PhotoDTO]:
        raise NotImplementedError


class SqlPhotoReadModel(PhotoReadModel):
    async def list_photos(
        self, context: TenantContext, status: PhotoStatus | None = None
    ) -> list[PhotoDTO]:
        async with async_session_manager() as session:
            stmt = select(GuestPhoto).where(GuestPhoto.wedding_id == context.wedding_id)
            if status is not None:
                stmt = stmt.where(GuestPhoto.status == status)
            result = await session.execute(
                stmt.order_by(GuestPhoto.created_at.desc(), GuestPhoto.uuid)
            )
            return [PhotoDTO.from_photo(photo) for photo in result.scalars().all()]
