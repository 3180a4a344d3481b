import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import NotFound, ValidationError
from src.photos.dtos import ModerationAction, PhotoDTO
from src.photos.repository.orm_models import GuestPhoto
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class PhotoModerationWriteModel(ABC):
    @abstractmethod
    async def moderate_photo(
        self, context: TenantContext, photo_id: UUID, action: ModerationAction
    ) -> PhotoDTO:
        raise NotImplementedError

    @abstractmethod
    async def bulk_moderate(
        self, context: TenantContext, photo_ids: list[UUID], action: ModerationAction
    ) -> int:
        """Apply one action to many photos, returns how many were updated."""
        raise NotImplementedError

    @abstractmethod
    async def delete_photo(self, context: TenantContext, photo_id: UUID) -> None:
        raise NotImplementedError


class SqlPhotoModerationWriteModel(PhotoModerationWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def moderate_photo(
        self, context: TenantContext, photo_id: UUID, action: ModerationAction
    ) -> PhotoDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            photo = (
                await session.execute(
                    select(GuestPhoto).where(
                        GuestPhoto.uuid == photo_id, GuestPhoto.wedding_id == context.wedding_id
                    )
                )
            ).scalar_one_or_none()
            if photo is None:
                raise NotFound("Photo not found")
            photo.status = action.status
            await session.flush()
            logger.info("Photo %s moderated: %s", photo_id, action.status)
            return PhotoDTO.from_photo(photo)

    async def bulk_moderate(
        self, context: TenantContext, photo_ids: list[UUID], action: ModerationAction
    ) -> int:
        if not photo_ids:
            raise ValidationError("No photos selected")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                update(GuestPhoto)
                .where(
                    GuestPhoto.uuid.in_(set(photo_ids)),
                    GuestPhoto.wedding_id == context.wedding_id,
                )
                .values(status=action.status)
                .execution_options(synchronize_session=False)
            )
        logger.info(
            "Bulk moderation on wedding %s: %s photos %s",
            context.wedding_id,
            result.rowcount,
            action.status,
        )
        return result.rowcount

    async def delete_photo(self, context: TenantContext, photo_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                delete(GuestPhoto).where(
                    GuestPhoto.uuid == photo_id, GuestPhoto.wedding_id == context.wedding_id
                )
            )
            if result.rowcount == 0:
                raise NotFound("Photo not found")
        logger.info("Deleted photo %s", photo_id)
