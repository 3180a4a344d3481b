from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr

from src.auth.dependencies import get_site_read_model, require_admin
from src.auth.dtos import CurrentUserDTO
from src.tenants.dtos import WeddingSiteDTO
from src.tenants.features.create_wedding_site.write_model import (
    SqlWeddingSiteWriteModel,
    WeddingSiteWriteModel,
)
from src.tenants.repository.read_models import SiteReadModel
from src.tenants.urls import ADMIN_WEDDING_SITES_URL

router = APIRouter()


class CreateWeddingSiteRequest(BaseModel):
    subdomain: str
    partner1_name: str
    partner2_name: str
    couple_email: EmailStr
    couple_password: str


class WeddingSiteResponse(BaseModel):
    tenant_id: UUID
    wedding_id: UUID
    subdomain: str
    couple_names: str
    rsvp_code_set: bool

    @classmethod
    def from_dto(cls, site: WeddingSiteDTO) -> "WeddingSiteResponse":
        return cls(
            tenant_id=site.tenant_id,
            wedding_id=site.wedding_id,
            subdomain=site.subdomain,
            couple_names=site.couple_names,
            rsvp_code_set=site.rsvp_code_set,
        )


def get_wedding_site_write_model() -> WeddingSiteWriteModel:
    return SqlWeddingSiteWriteModel()


@router.post(
    ADMIN_WEDDING_SITES_URL,
    response_model=WeddingSiteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_wedding_site(
    request: CreateWeddingSiteRequest,
    _admin: CurrentUserDTO = Depends(require_admin),
    write_model: WeddingSiteWriteModel = Depends(get_wedding_site_write_model),
) -> WeddingSiteResponse:
    site = await write_model.create_wedding_site(
        subdomain=request.subdomain,
        partner1_name=request.partner1_name,
        partner2_name=request.partner2_name,
        couple_email=request.couple_email,
        couple_password=request.couple_password,
    )
    return WeddingSiteResponse.from_dto(site)


@router.get(ADMIN_WEDDING_SITES_URL, response_model=list[WeddingSiteResponse])
async def list_wedding_sites(
    _admin: CurrentUserDTO = Depends(require_admin),
    read_model: SiteReadModel = Depends(get_site_read_model),
) -> list[WeddingSiteResponse]:
    return [WeddingSiteResponse.from_dto(site) for site in await read_model.list_sites()]
