import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from src.config.settings import settings
from src.exceptions import Unauthorized, ValidationError
from src.rsvp.dependencies import (
    codes_match,
    get_rsvp_access_read_model,
    require_rsvp_access,
    rsvp_cookie_name,
)
from src.rsvp.features.rsvp_access.read_model import RsvpAccessReadModel
from src.rsvp.urls import RSVP_SEARCH_URL, RSVP_VALIDATE_CODE_URL
from src.tenants.dependencies import get_site
from src.tenants.dtos import WeddingSiteDTO

logger = logging.getLogger(__name__)

router = APIRouter()


class RsvpCodeSubmit(BaseModel):
    code: str


class RsvpCodeResponse(BaseModel):
    valid: bool


class GuestSearchResponse(BaseModel):
    id: UUID
    name: str
    party_name: str | None = None


@router.post(RSVP_VALIDATE_CODE_URL, response_model=RsvpCodeResponse)
async def validate_rsvp_code(
    request: RsvpCodeSubmit,
    response: Response,
    site: WeddingSiteDTO = Depends(get_site),
    read_model: RsvpAccessReadModel = Depends(get_rsvp_access_read_model),
) -> RsvpCodeResponse:
    """Check the wedding's RSVP code and remember it in a cookie for 30 days."""
    code = await read_model.get_rsvp_code(site.context)
    if code is None:
        raise ValidationError(
            field_errors={"code": "RSVP code not configured for this wedding"}
        )
    if not codes_match(request.code.strip(), code):
        logger.info("Invalid RSVP code attempt for %s", site.subdomain)
        raise Unauthorized("Invalid RSVP code")

    response.set_cookie(
        key=rsvp_cookie_name(site),
        value=code,
        max_age=settings.rsvp_cookie_max_age,
        httponly=True,
        secure=not settings.base_domain.startswith("localhost"),
        samesite="lax",
    )
    return RsvpCodeResponse(valid=True)


@router.get(RSVP_SEARCH_URL, response_model=list[GuestSearchResponse])
async def search_guests(
    name: str = "",
    site: WeddingSiteDTO = Depends(require_rsvp_access),
    read_model: RsvpAccessReadModel = Depends(get_rsvp_access_read_model),
) -> list[GuestSearchResponse]:
    guests = await read_model.search_guests(site.context, name)
    return [GuestSearchResponse(id=g.id, name=g.name, party_name=g.party_name) for g in guests]
