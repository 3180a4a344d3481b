from fastapi import Depends

from src.auth.dependencies import get_site_read_model
from src.exceptions import NotFound
from src.tenants.dtos import WeddingSiteDTO
from src.tenants.repository.read_models import SiteReadModel


async def get_site(
    subdomain: str,
    read_model: SiteReadModel = Depends(get_site_read_model),
) -> WeddingSiteDTO:
    """Resolve the public wedding site addressed by ``{subdomain}`` in the path."""
    site = await read_model.get_site_by_subdomain(subdomain)
    if site is None:
        raise NotFound("Wedding not found")
    return site
