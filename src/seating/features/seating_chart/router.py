from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.seating.dtos import SeatedGuestDTO
from src.seating.features.manage_tables.router import TableResponse
from src.seating.features.seating_chart.read_model import (
    SeatingChartReadModel,
    SqlSeatingChartReadModel,
)
from src.seating.urls import SEATING_CHART_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class SeatedGuestResponse(BaseModel):
    id: UUID
    name: str
    plus_one_count: int | None = None
    seat_weight: int

    @classmethod
    def from_dto(cls, guest: SeatedGuestDTO) -> "SeatedGuestResponse":
        return cls(
            id=guest.id,
            name=guest.name,
            plus_one_count=guest.plus_one_count,
            seat_weight=guest.seat_weight,
        )


class TableWithGuestsResponse(BaseModel):
    table: TableResponse
    occupancy: int
    guests: list[SeatedGuestResponse]


class SeatingChartResponse(BaseModel):
    tables: list[TableWithGuestsResponse]
    unassigned_guests: list[SeatedGuestResponse]


def get_seating_chart_read_model() -> SeatingChartReadModel:
    return SqlSeatingChartReadModel()


@router.get(SEATING_CHART_URL, response_model=SeatingChartResponse)
async def get_seating_chart(
    context: TenantContext = Depends(get_tenant_context),
    read_model: SeatingChartReadModel = Depends(get_seating_chart_read_model),
) -> SeatingChartResponse:
    chart = await read_model.get_seating_chart(context)
    return SeatingChartResponse(
        tables=[
            TableWithGuestsResponse(
                table=TableResponse.from_dto(item.table),
                occupancy=item.occupancy,
                guests=[SeatedGuestResponse.from_dto(g) for g in item.guests],
            )
            for item in chart.tables
        ],
        unassigned_guests=[SeatedGuestResponse.from_dto(g) for g in chart.unassigned_guests],
    )
