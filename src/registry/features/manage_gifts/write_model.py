import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import NotFound, ValidationError
from src.registry.dtos import GiftDTO, GiftInputDTO
from src.registry.repository.orm_models import GiftItem
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class GiftWriteModel(ABC):
    @abstractmethod
    async def create_gift(self, context: TenantContext, data: GiftInputDTO) -> GiftDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_gift(
        self, context: TenantContext, gift_id: UUID, data: GiftInputDTO
    ) -> GiftDTO:
        """Edit a gift's details, its claim is never touched."""
        raise NotImplementedError

    @abstractmethod
    async def delete_gift(self, context: TenantContext, gift_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def reorder_gifts(self, context: TenantContext, ordered_ids: list[UUID]) -> None:
        raise NotImplementedError


class SqlGiftWriteModel(GiftWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_gift(self, context: TenantContext, data: GiftInputDTO) -> GiftDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            max_order = await session.scalar(
                select(func.max(GiftItem.order)).where(GiftItem.wedding_id == context.wedding_id)
            )
            gift = GiftItem(
                wedding_id=context.wedding_id,
                name=data.name,
                description=data.description,
                target_amount=data.target_amount,
                image_url=data.image_url,
                order=(max_order or 0) + 1,
                is_claimed=False,
            )
            session.add(gift)
            await session.flush()
            return GiftDTO.from_gift(gift)

    async def update_gift(
        self, context: TenantContext, gift_id: UUID, data: GiftInputDTO
    ) -> GiftDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            gift = await self._get_gift(session, context, gift_id)
            gift.name = data.name
            gift.description = data.description
            gift.target_amount = data.target_amount
            gift.image_url = data.image_url
            await session.flush()
            return GiftDTO.from_gift(gift)

    async def delete_gift(self, context: TenantContext, gift_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            gift = await self._get_gift(session, context, gift_id)
            await session.delete(gift)
            await session.flush()
        logger.info("Deleted gift %s from wedding %s", gift_id, context.wedding_id)

    async def reorder_gifts(self, context: TenantContext, ordered_ids: list[UUID]) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(GiftItem).where(GiftItem.wedding_id == context.wedding_id)
            )
            gifts = {gift.uuid: gift for gift in result.scalars().all()}
            if set(ordered_ids) != set(gifts) or len(ordered_ids) != len(gifts):
                raise ValidationError(
                    field_errors={"ordered_ids": "Must list every gift of the wedding exactly once"}
                )
            for position, gift_id in enumerate(ordered_ids, start=1):
                gifts[gift_id].order = position
            await session.flush()

    async def _get_gift(self, session, context: TenantContext, gift_id: UUID) -> GiftItem:
        result = await session.execute(
            select(GiftItem).where(GiftItem.uuid == gift_id, GiftItem.wedding_id == context.wedding_id)
        )
        gift = result.scalar_one_or_none()
        if gift is None:
            raise NotFound("Gift not found")
        return gift
