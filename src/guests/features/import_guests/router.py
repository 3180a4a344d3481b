from fastapi import APIRouter, Depends, UploadFile
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.exceptions import ValidationError
from src.guests.features.import_guests.parser import parse_guest_file
from src.guests.features.import_guests.write_model import (
    GuestImportWriteModel,
    SqlGuestImportWriteModel,
)
from src.guests.urls import IMPORT_GUESTS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()

MAX_IMPORT_BYTES = 5 * 1024 * 1024


class ImportErrorResponse(BaseModel):
    row: int
    message: str


class ImportGuestsResponse(BaseModel):
    imported: int
    errors: list[ImportErrorResponse]


def get_guest_import_write_model() -> GuestImportWriteModel:
    return SqlGuestImportWriteModel()


@router.post(IMPORT_GUESTS_URL, response_model=ImportGuestsResponse)
async def import_guests(
    file: UploadFile,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GuestImportWriteModel = Depends(get_guest_import_write_model),
) -> ImportGuestsResponse:
    """
    Import guests from a CSV or Excel file.
    Valid rows are imported, invalid rows come back in ``errors``.
    """
    content = await file.read()
    if not content:
        raise ValidationError(field_errors={"file": "File is empty"})
    if len(content) > MAX_IMPORT_BYTES:
        raise ValidationError(field_errors={"file": "File must be at most 5 MB"})

    parsed = parse_guest_file(content, file.filename or "guests.csv")
    imported = await write_model.import_guests(context, parsed.guests)
    return ImportGuestsResponse(
        imported=imported,
        errors=[ImportErrorResponse(row=e.row, message=e.message) for e in parsed.errors],
    )
