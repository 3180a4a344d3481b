from fastapi import APIRouter, Depends, Response

from src.auth.dependencies import get_tenant_context
from src.models.base import utcnow
from src.rsvp.features.export_rsvps.csv_export import export_rsvps_csv
from src.rsvp.features.export_rsvps.read_model import (
    RsvpExportReadModel,
    SqlRsvpExportReadModel,
)
from src.rsvp.urls import RSVP_EXPORT_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


def get_rsvp_export_read_model() -> RsvpExportReadModel:
    return SqlRsvpExportReadModel()


@router.get(RSVP_EXPORT_URL, response_class=Response)
async def export_rsvps(
    context: TenantContext = Depends(get_tenant_context),
    read_model: RsvpExportReadModel = Depends(get_rsvp_export_read_model),
) -> Response:
    """Download every invitation and its answer as CSV."""
    csv = export_rsvps_csv(await read_model.get_export_rows(context))
    filename = f"rsvp-export-{utcnow().date().isoformat()}.csv"
    return Response(
        content=csv,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
