from uuid import UUID, uuid4

from src.auth.dependencies import get_current_site
from src.exceptions import NotFound
from src.guests.dtos import GuestDTO, GuestInputDTO
from src.guests.features.manage_guests.read_model import GuestReadModel
from src.guests.features.manage_guests.router import get_guest_read_model, get_guest_write_model
from src.guests.features.manage_guests.write_model import GuestWriteModel
from src.guests.urls import GUEST_URL, GUESTS_URL
from src.tenants.dtos import TenantContext


class InMemoryGuestStore(GuestWriteModel, GuestReadModel):
    def __init__(self):
        self.guests: dict[UUID, tuple[UUID, GuestDTO]] = {}

    async def create_guest(self, context: TenantContext, data: GuestInputDTO) -> GuestDTO:
        guest = GuestDTO(id=uuid4(), **data.__dict__)
        self.guests[guest.id] = (context.wedding_id, guest)
        return guest

    async def update_guest(self, context, guest_id, data) -> GuestDTO:
        if guest_id not in self.guests or self.guests[guest_id][0] != context.wedding_id:
            raise NotFound("Guest not found")
        guest = GuestDTO(id=guest_id, **data.__dict__)
        self.guests[guest_id] = (context.wedding_id, guest)
        return guest

    async def delete_guest(self, context, guest_id) -> None:
        if guest_id not in self.guests:
            raise NotFound("Guest not found")
        del self.guests[guest_id]

    async def list_guests(self, context) -> list[GuestDTO]:
        return sorted(
            (g for wedding_id, g in self.guests.values() if wedding_id == context.wedding_id),
            key=lambda g: g.name.lower(),
        )


def overrides_for(site, store):
    return {
        get_current_site: lambda: site,
        get_guest_write_model: lambda: store,
        get_guest_read_model: lambda: store,
    }


async def test_create_and_list_guests(client_factory, site):
    store = InMemoryGuestStore()

    async with client_factory(overrides_for(site, store)) as client:
        created = await client.post(
            GUESTS_URL, json={"name": " bob ", "email": "BOB@Example.com", "party_size": 2}
        )
        await client.post(GUESTS_URL, json={"name": "Alice"})
        listed = await client.get(GUESTS_URL)

    assert created.status_code == 201
    assert created.json()["name"] == "bob"
    assert created.json()["email"] == "bob@example.com"
    assert [g["name"] for g in listed.json()] == ["Alice", "bob"]


async def test_create_guest_validation_errors(client_factory, site):
    store = InMemoryGuestStore()

    async with client_factory(overrides_for(site, store)) as client:
        response = await client.post(
            GUESTS_URL, json={"name": "  ", "email": "nope", "party_size": 0}
        )

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert errors == {
        "name": "Name is required",
        "email": "Invalid email format",
        "party_size": "Party size must be at least 1",
    }
    assert store.guests == {}


async def test_update_unknown_guest_is_404(client_factory, site):
    async with client_factory(overrides_for(site, InMemoryGuestStore())) as client:
        response = await client.put(GUEST_URL.format(guest_id=uuid4()), json={"name": "Alice"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Guest not found"


async def test_delete_guest(client_factory, site):
    store = InMemoryGuestStore()
    guest = await store.create_guest(site.context, GuestInputDTO(name="Alice"))

    async with client_factory(overrides_for(site, store)) as client:
        response = await client.delete(GUEST_URL.format(guest_id=guest.id))

    assert response.status_code == 204
    assert store.guests == {}
