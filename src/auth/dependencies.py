from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.auth.dtos import CurrentUserDTO
from src.auth.security import decode_access_token
from src.exceptions import Forbidden, NotFound, Unauthorized
from src.tenants.dtos import TenantContext, WeddingSiteDTO
from src.tenants.repository.read_models import SiteReadModel, SqlSiteReadModel

bearer_scheme = HTTPBearer(auto_error=False)


def get_site_read_model() -> SiteReadModel:
    return SqlSiteReadModel()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUserDTO:
    if credentials is None:
        raise Unauthorized()
    return decode_access_token(credentials.credentials)


async def require_admin(user: CurrentUserDTO = Depends(get_current_user)) -> CurrentUserDTO:
    if not user.is_admin:
        raise Forbidden()
    return user


async def get_current_site(
    user: CurrentUserDTO = Depends(get_current_user),
    read_model: SiteReadModel = Depends(get_site_read_model),
) -> WeddingSiteDTO:
    """The logged-in couple's wedding site."""
    if user.tenant_id is None:
        raise Unauthorized()
    site = await read_model.get_site_by_tenant(user.tenant_id)
    if site is None:
        raise NotFound("Wedding not found")
    return site


async def get_tenant_context(site: WeddingSiteDTO = Depends(get_current_site)) -> TenantContext:
    """Scope for dashboard endpoints."""
    return site.context
