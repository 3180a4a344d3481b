import abc

from sqlalchemy import select

from src.config.database import async_session_manager
from src.registry.dtos import ExternalRegistryDTO
from src.registry.repository.orm_models import ExternalRegistry
from src.tenants.dtos import TenantContext


class ExternalRegistryReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_external_registries(self, context: TenantContext) -> list[ExternalRegistryDTO]:
        raise NotImplementedError


class SqlExternalRegistryReadModel(ExternalRegistryReadModel):
    async def list_external_registries(self, context: TenantContext) -> list[ExternalRegistryDTO]:
        async with async_session_manager() as session:
            result = await session.execute(
                select(ExternalRegistry)
                .where(ExternalRegistry.wedding_id == context.wedding_id)
                .order_by(ExternalRegistry.order, ExternalRegistry.created_at)
            )
            return [ExternalRegistryDTO.from_registry(r) for r in result.scalars().all()]
