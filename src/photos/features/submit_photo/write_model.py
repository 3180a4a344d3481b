"""
Guest photo submission.

Guests upload the image to blob storage first and then register its URL here.
Registering the same URL twice returns the photo created the first time.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import Forbidden
from src.photos.dtos import PhotoDTO, PhotoInputDTO, PhotoStatus
from src.photos.repository.orm_models import GuestPhoto
from src.tenants.dtos import WeddingSiteDTO

logger = logging.getLogger(__name__)


class PhotoSubmissionWriteModel(ABC):
    @abstractmethod
    async def submit_photo(self, site: WeddingSiteDTO, data: PhotoInputDTO) -> PhotoDTO:
        """Register a guest photo.

        Raises:
            Forbidden: photo sharing is disabled for the wedding
        """
        raise NotImplementedError


class SqlPhotoSubmissionWriteModel(PhotoSubmissionWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def submit_photo(self, site: WeddingSiteDTO, data: PhotoInputDTO) -> PhotoDTO:
        if not site.photo_sharing_enabled:
            raise Forbidden("Photo sharing is not enabled")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            existing = (
                await session.execute(
                    select(GuestPhoto).where(
                        GuestPhoto.wedding_id == site.wedding_id, GuestPhoto.url == data.url
                    )
                )
            ).scalar_one_or_none()
            if existing is not None:
                return PhotoDTO.from_photo(existing)

            status = (
                PhotoStatus.PENDING if site.photo_moderation_required else PhotoStatus.APPROVED
            )
            photo = GuestPhoto(
                wedding_id=site.wedding_id,
                url=data.url,
                uploader_name=data.uploader_name,
                caption=data.caption,
                status=status,
            )
            session.add(photo)
            await session.flush()
            await session.refresh(photo)
            logger.info("Photo %s submitted to wedding %s as %s", photo.uuid, site.wedding_id, status)
            return PhotoDTO.from_photo(photo)
