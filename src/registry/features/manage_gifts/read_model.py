import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.registry.dtos import GiftDTO
from src.registry.repository.orm_models import GiftItem
from src.tenants.dtos import TenantContext


class GiftReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_gifts(self, context: TenantContext) -> list[GiftDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_gift(self, context: TenantContext, gift_id: UUID) -> GiftDTO | None:
        raise NotImplementedError


class SqlGiftReadModel(GiftReadModel):
    async def list_gifts(self, context: TenantContext) -> list[GiftDTO]:
        async with async_session_manager() as session:
            result = await session.execute(
                select(GiftItem)
                .where(GiftItem.wedding_id == context.wedding_id)
                .order_by(GiftItem.order, GiftItem.created_at)
            )
            return [GiftDTO.from_gift(gift) for gift in result.scalars().all()]

    async def get_gift(self, context: TenantContext, gift_id: UUID) -> GiftDTO | None:
        async with async_session_manager() as session:
            result = await session.execute(
                select(GiftItem).where(
                    GiftItem.uuid == gift_id, GiftItem.wedding_id == context.wedding_id
                )
            )
            gift = result.scalar_one_or_none()
            return GiftDTO.from_gift(gift) if gift else None
