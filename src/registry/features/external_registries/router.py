from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.registry.dtos import ExternalRegistryDTO, clean_external_registry_input
from src.registry.features.external_registries.read_model import (
    ExternalRegistryReadModel,
    SqlExternalRegistryReadModel,
)
from src.registry.features.external_registries.write_model import (
    ExternalRegistryWriteModel,
    SqlExternalRegistryWriteModel,
)
from src.registry.urls import (
    EXTERNAL_REGISTRIES_URL,
    EXTERNAL_REGISTRY_URL,
    REORDER_EXTERNAL_REGISTRIES_URL,
    SITE_EXTERNAL_REGISTRIES_URL,
)
from src.tenants.dependencies import get_site
from src.tenants.dtos import TenantContext, WeddingSiteDTO

router = APIRouter()


class ExternalRegistrySubmit(BaseModel):
    name: str
    url: str
    description: str | None = None


class ReorderSubmit(BaseModel):
    ordered_ids: list[UUID]


class ExternalRegistryResponse(BaseModel):
    id: UUID
    name: str
    url: str
    description: str | None = None
    order: int

    @classmethod
    def from_dto(cls, registry: ExternalRegistryDTO) -> "ExternalRegistryResponse":
        return cls(
            id=registry.id,
            name=registry.name,
            url=registry.url,
            description=registry.description,
            order=registry.order,
        )


def get_external_registry_write_model() -> ExternalRegistryWriteModel:
    return SqlExternalRegistryWriteModel()


def get_external_registry_read_model() -> ExternalRegistryReadModel:
    return SqlExternalRegistryReadModel()


@router.get(EXTERNAL_REGISTRIES_URL, response_model=list[ExternalRegistryResponse])
async def list_external_registries(
    context: TenantContext = Depends(get_tenant_context),
    read_model: ExternalRegistryReadModel = Depends(get_external_registry_read_model),
) -> list[ExternalRegistryResponse]:
    registries = await read_model.list_external_registries(context)
    return [ExternalRegistryResponse.from_dto(registry) for registry in registries]


@router.post(
    EXTERNAL_REGISTRIES_URL,
    response_model=ExternalRegistryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_external_registry(
    request: ExternalRegistrySubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: ExternalRegistryWriteModel = Depends(get_external_registry_write_model),
) -> ExternalRegistryResponse:
    registry = await write_model.create_external_registry(
        context, clean_external_registry_input(**request.model_dump())
    )
    return ExternalRegistryResponse.from_dto(registry)


@router.post(REORDER_EXTERNAL_REGISTRIES_URL, status_code=status.HTTP_204_NO_CONTENT)
async def reorder_external_registries(
    request: ReorderSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: ExternalRegistryWriteModel = Depends(get_external_registry_write_model),
) -> Response:
    await write_model.reorder_external_registries(context, request.ordered_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(EXTERNAL_REGISTRY_URL, response_model=ExternalRegistryResponse)
async def update_external_registry(
    registry_id: UUID,
    request: ExternalRegistrySubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: ExternalRegistryWriteModel = Depends(get_external_registry_write_model),
) -> ExternalRegistryResponse:
    registry = await write_model.update_external_registry(
        context, registry_id, clean_external_registry_input(**request.model_dump())
    )
    return ExternalRegistryResponse.from_dto(registry)


@router.delete(EXTERNAL_REGISTRY_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_external_registry(
    registry_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: ExternalRegistryWriteModel = Depends(get_external_registry_write_model),
) -> Response:
    await write_model.delete_external_registry(context, registry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(SITE_EXTERNAL_REGISTRIES_URL, response_model=list[ExternalRegistryResponse])
async def list_public_external_registries(
    site: WeddingSiteDTO = Depends(get_site),
    read_model: ExternalRegistryReadModel = Depends(get_external_registry_read_model),
) -> list[ExternalRegistryResponse]:
    registries = await read_model.list_external_registries(site.context)
    return [ExternalRegistryResponse.from_dto(registry) for registry in registries]
