from fastapi import APIRouter, Depends, Response

from src.auth.dependencies import get_tenant_context
from src.seating.features.export_seating.csv_export import export_seating_csv
from src.seating.features.export_seating.read_model import (
    SeatingExportReadModel,
    SqlSeatingExportReadModel,
)
from src.seating.urls import SEATING_EXPORT_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


def get_seating_export_read_model() -> SeatingExportReadModel:
    return SqlSeatingExportReadModel()


@router.get(SEATING_EXPORT_URL, response_class=Response)
async def export_seating(
    context: TenantContext = Depends(get_tenant_context),
    read_model: SeatingExportReadModel = Depends(get_seating_export_read_model),
) -> Response:
    """Seating chart as CSV for the venue's catering team."""
    csv = export_seating_csv(await read_model.get_export_rows(context))
    return Response(
        content=csv,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="seating-chart.csv"'},
    )
