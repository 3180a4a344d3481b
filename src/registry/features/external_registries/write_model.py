import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import NotFound, ValidationError
from src.registry.dtos import ExternalRegistryDTO, ExternalRegistryInputDTO
from src.registry.repository.orm_models import ExternalRegistry
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class ExternalRegistryWriteModel(ABC):
    @abstractmethod
    async def create_external_registry(
        self, context: TenantContext, data: ExternalRegistryInputDTO
    ) -> ExternalRegistryDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_external_registry(
        self, context: TenantContext, registry_id: UUID, data: ExternalRegistryInputDTO
    ) -> ExternalRegistryDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_external_registry(self, context: TenantContext, registry_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def reorder_external_registries(
        self, context: TenantContext, ordered_ids: list[UUID]
    ) -> None:
        raise NotImplementedError


class SqlExternalRegistryWriteModel(ExternalRegistryWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_external_registry(
        self, context: TenantContext, data: ExternalRegistryInputDTO
    ) -> ExternalRegistryDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            max_order = await session.scalar(
                select(func.max(ExternalRegistry.order)).where(
                    ExternalRegistry.wedding_id == context.wedding_id
                )
            )
            registry = ExternalRegistry(
                wedding_id=context.wedding_id,
                name=data.name,
                url=data.url,
                description=data.description,
                order=(max_order or 0) + 1,
            )
            session.add(registry)
            await session.flush()
            logger.info("Added external registry %s to wedding %s", data.name, context.wedding_id)
            return ExternalRegistryDTO.from_registry(registry)

    async def update_external_registry(
        self, context: TenantContext, registry_id: UUID, data: ExternalRegistryInputDTO
    ) -> ExternalRegistryDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            registry = await self._get_registry(session, context, registry_id)
            registry.name = data.name
            registry.url = data.url
            registry.description = data.description
            await session.flush()
            return ExternalRegistryDTO.from_registry(registry)

    async def delete_external_registry(self, context: TenantContext, registry_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            registry = await self._get_registry(session, context, registry_id)
            await session.delete(registry)
            await session.flush()
        logger.info("Deleted external registry %s from wedding %s", registry_id, context.wedding_id)

    async def reorder_external_registries(
        self, context: TenantContext, ordered_ids: list[UUID]
    ) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(ExternalRegistry).where(ExternalRegistry.wedding_id == context.wedding_id)
            )
            registries = {registry.uuid: registry for registry in result.scalars().all()}
            if set(ordered_ids) != set(registries) or len(ordered_ids) != len(registries):
                raise ValidationError(
                    field_errors={
                        "ordered_ids": "Must list every registry of the wedding exactly once"
                    }
                )
            for position, registry_id in enumerate(ordered_ids, start=1):
                registries[registry_id].order = position
            await session.flush()

    async def _get_registry(
        self, session, context: TenantContext, registry_id: UUID
    ) -> ExternalRegistry:
        result = await session.execute(
            select(ExternalRegistry).where(
                ExternalRegistry.uuid == registry_id,
                ExternalRegistry.wedding_id == context.wedding_id,
            )
        )
        registry = result.scalar_one_or_none()
        if registry is None:
            raise NotFound("Registry not found")
        return registry
