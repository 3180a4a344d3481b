from uuid import uuid4

from src.auth.dependencies import get_current_site
from src.registry.dtos import ExternalRegistryDTO
from src.registry.features.external_registries.read_model import ExternalRegistryReadModel
from src.registry.features.external_registries.router import (
    get_external_registry_read_model,
    get_external_registry_write_model,
)
from src.registry.features.external_registries.write_model import ExternalRegistryWriteModel
from src.registry.urls import (
    EXTERNAL_REGISTRIES_URL,
    EXTERNAL_REGISTRY_URL,
    SITE_EXTERNAL_REGISTRIES_URL,
)
from src.tenants.dependencies import get_site

AMAZON = ExternalRegistryDTO(
    id=uuid4(), name="Amazon", url="https://amazon.example/list/1", order=1
)


class InMemoryExternalRegistryWriteModel(ExternalRegistryWriteModel):
    def __init__(self):
        self.deleted = []

    async def create_external_registry(self, context, data):
        return ExternalRegistryDTO(
            id=uuid4(), name=data.name, url=data.url, description=data.description, order=1
        )

    async def update_external_registry(self, context, registry_id, data):
        return ExternalRegistryDTO(id=registry_id, name=data.name, url=data.url, order=1)

    async def delete_external_registry(self, context, registry_id):
        self.deleted.append(registry_id)

    async def reorder_external_registries(self, context, ordered_ids):
        pass


class StaticExternalRegistryReadModel(ExternalRegistryReadModel):
    async def list_external_registries(self, context):
        return [AMAZON]


async def test_create_external_registry(client_factory, site):
    overrides = {
        get_current_site: lambda: site,
        get_external_registry_write_model: InMemoryExternalRegistryWriteModel,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            EXTERNAL_REGISTRIES_URL,
            json={"name": "Etsy", "url": "https://etsy.example/r/2", "description": ""},
        )

    assert response.status_code == 201
    assert response.json()["name"] == "Etsy"
    assert response.json()["description"] is None


async def test_create_external_registry_validation(client_factory, site):
    overrides = {
        get_current_site: lambda: site,
        get_external_registry_write_model: InMemoryExternalRegistryWriteModel,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            EXTERNAL_REGISTRIES_URL, json={"name": "Etsy", "url": "not a link"}
        )

    assert response.status_code == 422
    assert response.json()["errors"] == {"url": "Must be a valid URL"}


async def test_delete_external_registry(client_factory, site):
    write_model = InMemoryExternalRegistryWriteModel()
    overrides = {
        get_current_site: lambda: site,
        get_external_registry_write_model: lambda: write_model,
    }

    async with client_factory(overrides) as client:
        response = await client.delete(EXTERNAL_REGISTRY_URL.format(registry_id=AMAZON.id))

    assert response.status_code == 204
    assert write_model.deleted == [AMAZON.id]


async def test_public_external_registries(client_factory, site):
    overrides = {
        get_site: lambda: site,
        get_external_registry_read_model: StaticExternalRegistryReadModel,
    }

    async with client_factory(overrides) as client:
        response = await client.get(
            SITE_EXTERNAL_REGISTRIES_URL.format(subdomain=site.subdomain)
        )

    assert response.status_code == 200
    assert [registry["url"] for registry in response.json()] == ["https://amazon.example/list/1"]


async def test_external_registries_require_login(client):
    response = await client.get(EXTERNAL_REGISTRIES_URL)

    assert response.status_code == 401
