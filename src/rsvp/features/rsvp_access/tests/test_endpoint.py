from uuid import uuid4

from src.rsvp.dependencies import get_rsvp_access_read_model, rsvp_cookie_name
from src.rsvp.dtos import GuestSearchResultDTO
from src.rsvp.features.rsvp_access.read_model import RsvpAccessReadModel
from src.rsvp.urls import RSVP_SEARCH_URL, RSVP_VALIDATE_CODE_URL
from src.tenants.dependencies import get_site


class InMemoryRsvpAccessReadModel(RsvpAccessReadModel):
    def __init__(self, code=None, guests=()):
        self.code = code
        self.guests = list(guests)

    async def get_rsvp_code(self, context):
        return self.code

    async def search_guests(self, context, name):
        return [g for g in self.guests if name.lower() in g.name.lower()]


def overrides_for(site, read_model):
    return {get_site: lambda: site, get_rsvp_access_read_model: lambda: read_model}


async def test_valid_code_sets_cookie(client_factory, site):
    read_model = InMemoryRsvpAccessReadModel(code="SUNSHINE")

    async with client_factory(overrides_for(site, read_model)) as client:
        response = await client.post(
            RSVP_VALIDATE_CODE_URL.format(subdomain=site.subdomain), json={"code": " SUNSHINE "}
        )

    assert response.status_code == 200
    assert response.json() == {"valid": True}
    assert response.cookies.get(rsvp_cookie_name(site)) == "SUNSHINE"


async def test_wrong_code_is_401(client_factory, site):
    read_model = InMemoryRsvpAccessReadModel(code="SUNSHINE")

    async with client_factory(overrides_for(site, read_model)) as client:
        response = await client.post(
            RSVP_VALIDATE_CODE_URL.format(subdomain=site.subdomain), json={"code": "sunshine"}
        )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid RSVP code"


async def test_no_code_configured(client_factory, site):
    async with client_factory(overrides_for(site, InMemoryRsvpAccessReadModel())) as client:
        response = await client.post(
            RSVP_VALIDATE_CODE_URL.format(subdomain=site.subdomain), json={"code": "SUNSHINE"}
        )

    assert response.status_code == 422
    assert "code" in response.json()["errors"]


async def test_search_requires_cookie(client_factory, site):
    alice = GuestSearchResultDTO(id=uuid4(), name="Alice Smith", party_name="Smiths")
    read_model = InMemoryRsvpAccessReadModel(code="SUNSHINE", guests=[alice])
    url = RSVP_SEARCH_URL.format(subdomain=site.subdomain)

    async with client_factory(overrides_for(site, read_model)) as client:
        without_cookie = await client.get(url, params={"name": "ali"})
        client.cookies.set(rsvp_cookie_name(site), "SUNSHINE")
        with_cookie = await client.get(url, params={"name": "ali"})

    assert without_cookie.status_code == 401
    assert without_cookie.json()["detail"] == "Please enter the RSVP code"
    assert with_cookie.status_code == 200
    assert with_cookie.json() == [
        {"id": str(alice.id), "name": "Alice Smith", "party_name": "Smiths"}
    ]


async def test_search_is_open_without_code(client_factory, site):
    read_model = InMemoryRsvpAccessReadModel(guests=[GuestSearchResultDTO(id=uuid4(), name="Bob")])

    async with client_factory(overrides_for(site, read_model)) as client:
        response = await client.get(
            RSVP_SEARCH_URL.format(subdomain=site.subdomain), params={"name": "bo"}
        )

    assert response.status_code == 200
    assert [g["name"] for g in response.json()] == ["Bob"]
