import hmac

from fastapi import Depends, Request

from src.exceptions import Unauthorized
from src.rsvp.features.rsvp_access.read_model import (
    RsvpAccessReadModel,
    SqlRsvpAccessReadModel,
)
from src.tenants.dependencies import get_site
from src.tenants.dtos import WeddingSiteDTO


def rsvp_cookie_name(site: WeddingSiteDTO) -> str:
    return f"rsvp_auth_{site.wedding_id}"


def get_rsvp_access_read_model() -> RsvpAccessReadModel:
    return SqlRsvpAccessReadModel()


def codes_match(given: str | None, expected: str) -> bool:
    return given is not None and hmac.compare_digest(given.encode(), expected.encode())


async def require_rsvp_access(
    request: Request,
    site: WeddingSiteDTO = Depends(get_site),
    read_model: RsvpAccessReadModel = Depends(get_rsvp_access_read_model),
) -> WeddingSiteDTO:
    """Guest-facing RSVP endpoints need the cookie set by a valid RSVP code.

    Weddings without an RSVP code are open.
    """
    code = await read_model.get_rsvp_code(site.context)
    if code is None:
        return site
    if not codes_match(request.cookies.get(rsvp_cookie_name(site)), code):
        raise Unauthorized("Please enter the RSVP code")
    return site
