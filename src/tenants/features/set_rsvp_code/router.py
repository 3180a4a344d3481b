from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.tenants.dtos import TenantContext
from src.tenants.features.set_rsvp_code.write_model import (
    RsvpCodeWriteModel,
    SqlRsvpCodeWriteModel,
)
from src.tenants.urls import RSVP_CODE_URL

router = APIRouter()


class SetRsvpCodeRequest(BaseModel):
    code: str


class SetRsvpCodeResponse(BaseModel):
    code: str


def get_rsvp_code_write_model() -> RsvpCodeWriteModel:
    return SqlRsvpCodeWriteModel()


@router.put(RSVP_CODE_URL, response_model=SetRsvpCodeResponse)
async def set_rsvp_code(
    request: SetRsvpCodeRequest,
    context: TenantContext = Depends(get_tenant_context),
    write_model: RsvpCodeWriteModel = Depends(get_rsvp_code_write_model),
) -> SetRsvpCodeResponse:
    """Set the code guests enter on the public RSVP page."""
    code = await write_model.set_rsvp_code(context, request.code)
    return SetRsvpCodeResponse(code=code)
