import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.photos.dtos import PhotoSettingsDTO
from src.tenants.dtos import TenantContext
from src.tenants.repository.orm_models import Wedding

logger = logging.getLogger(__name__)


class PhotoSettingsWriteModel(ABC):
    @abstractmethod
    async def update_photo_settings(
        self, context: TenantContext, settings: PhotoSettingsDTO
    ) -> PhotoSettingsDTO:
        raise NotImplementedError


class SqlPhotoSettingsWriteModel(PhotoSettingsWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def update_photo_settings(
        self, context: TenantContext, settings: PhotoSettingsDTO
    ) -> PhotoSettingsDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            await session.execute(
                update(Wedding)
                .where(Wedding.uuid == context.wedding_id)
                .values(
                    photo_sharing_enabled=settings.photo_sharing_enabled,
                    photo_moderation_required=settings.photo_moderation_required,
                )
                .execution_options(synchronize_session=False)
            )
        logger.info(
            "Photo settings of wedding %s: sharing=%s moderation=%s",
            context.wedding_id,
            settings.photo_sharing_enabled,
            settings.photo_moderation_required,
        )
        return settings
