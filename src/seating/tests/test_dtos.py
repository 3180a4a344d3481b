from uuid import uuid4

import pytest

from src.exceptions import ValidationError
from src.seating.dtos import SeatedGuestDTO, TableDTO, TableWithGuestsDTO, clean_table_input


def test_clean_table_input():
    data = clean_table_input("  Table 1 ", 8)

    assert data.name == "Table 1"
    assert data.capacity == 8


@pytest.mark.parametrize(
    "name, capacity, field",
    [
        ("", 8, "name"),
        ("x" * 101, 8, "name"),
        ("Table 1", 0, "capacity"),
        ("Table 1", None, "capacity"),
    ],
)
def test_invalid_table_input(name, capacity, field):
    with pytest.raises(ValidationError) as exc_info:
        clean_table_input(name, capacity)

    assert list(exc_info.value.field_errors) == [field]


def test_table_occupancy():
    table = TableWithGuestsDTO(
        table=TableDTO(id=uuid4(), name="Table 1", capacity=4),
        guests=[
            SeatedGuestDTO(id=uuid4(), name="Alice", plus_one_count=2),
            SeatedGuestDTO(id=uuid4(), name="Bob"),
        ],
    )

    assert table.occupancy == 4
