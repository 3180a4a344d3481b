from uuid import uuid4

from src.auth.dependencies import get_current_site
from src.exceptions import Conflict
from src.seating.features.assign_guest.router import get_seat_assignment_write_model
from src.seating.features.assign_guest.write_model import SeatAssignmentWriteModel
from src.seating.urls import ASSIGN_GUEST_URL


class InMemorySeatAssignmentWriteModel(SeatAssignmentWriteModel):
    def __init__(self, full_tables=()):
        self.full_tables = set(full_tables)
        self.assignments = {}

    async def assign_guest_to_table(self, context, guest_id, table_id):
        if table_id in self.full_tables:
            raise Conflict("Table is at capacity")
        self.assignments[guest_id] = table_id


async def test_assign_guest(client_factory, site):
    write_model = InMemorySeatAssignmentWriteModel()
    guest_id, table_id = uuid4(), uuid4()
    overrides = {
        get_current_site: lambda: site,
        get_seat_assignment_write_model: lambda: write_model,
    }

    async with client_factory(overrides) as client:
        seated = await client.put(
            ASSIGN_GUEST_URL.format(guest_id=guest_id), json={"table_id": str(table_id)}
        )
        assert write_model.assignments == {guest_id: table_id}
        unseated = await client.put(ASSIGN_GUEST_URL.format(guest_id=guest_id), json={})

    assert seated.status_code == 204
    assert unseated.status_code == 204
    assert write_model.assignments == {guest_id: None}


async def test_full_table_is_409(client_factory, site):
    full_table = uuid4()
    overrides = {
        get_current_site: lambda: site,
        get_seat_assignment_write_model: lambda: InMemorySeatAssignmentWriteModel([full_table]),
    }

    async with client_factory(overrides) as client:
        response = await client.put(
            ASSIGN_GUEST_URL.format(guest_id=uuid4()), json={"table_id": str(full_table)}
        )

    assert response.status_code == 409
    assert response.json()["detail"] == "Table is at capacity"
