import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.messaging.dtos import BroadcastDTO
from src.messaging.repository.orm_models import BroadcastMessage
from src.tenants.dtos import TenantContext


class BroadcastReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_broadcasts(self, context: TenantContext) -> list[BroadcastDTO]:
        """Newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_broadcast(self, context: TenantContext, message_id: UUID) -> BroadcastDTO | None:
        raise NotImplementedError


class SqlBroadcastReadModel(BroadcastReadModel):
    async def list_broadcasts(self, context: TenantContext) -> list[BroadcastDTO]:
        async with async_session_manager() as session:
            result = await session.execute(
                select(BroadcastMessage)
                .where(BroadcastMessage.wedding_id == context.wedding_id)
                .order_by(BroadcastMessage.created_at.desc())
            )
            return [BroadcastDTO.from_message(message) for message in result.scalars().all()]

    async def get_broadcast(self, context: TenantContext, message_id: UUID) -> BroadcastDTO | None:
        async with async_session_manager() as session:
            result = await session.execute(
                select(BroadcastMessage).where(
                    BroadcastMessage.uuid == message_id,
                    BroadcastMessage.wedding_id == context.wedding_id,
                )
            )
            message = result.scalar_one_or_none()
            return BroadcastDTO.from_message(message) if message else None
