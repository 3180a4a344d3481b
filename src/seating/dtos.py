from dataclasses import dataclass, field
from uuid import UUID

from src.exceptions import ValidationError
from src.guests.dtos import empty_to_none
from src.seating.capacity import seat_weight

MAX_TABLE_NAME = 100


@dataclass(frozen=True)
class TableDTO:
    id: UUID
    name: str
    capacity: int
    order: int = 0

    @classmethod
    def from_table(cls, table) -> "TableDTO":
        return cls(id=table.uuid, name=table.name, capacity=table.capacity, order=table.order)


@dataclass(frozen=True)
class SeatedGuestDTO:
    id: UUID
    name: str
    plus_one_count: int | None = None

    @property
    def seat_weight(self) -> int:
        return seat_weight(self.plus_one_count)


@dataclass(frozen=True)
class TableWithGuestsDTO:
    table: TableDTO
    guests: list[SeatedGuestDTO] = field(default_factory=list)

    @property
    def occupancy(self) -> int:
        return sum(guest.seat_weight for guest in self.guests)


@dataclass(frozen=True)
class SeatingChartDTO:
    tables: list[TableWithGuestsDTO]
    unassigned_guests: list[SeatedGuestDTO]


@dataclass(frozen=True)
class TableInputDTO:
    name: str
    capacity: int


def clean_table_input(name: str | None, capacity: int | None) -> TableInputDTO:
    errors = {}
    name = empty_to_none(name)
    if name is None:
        errors["name"] = "Table name is required"
    elif len(name) > MAX_TABLE_NAME:
        errors["name"] = f"Table name must be at most {MAX_TABLE_NAME} characters"
    if capacity is None or capacity < 1:
        errors["capacity"] = "Capacity must be at least 1"
    if errors:
        raise ValidationError(field_errors=errors)
    return TableInputDTO(name=name, capacity=capacity)
