from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.guests.dtos import GuestDTO, clean_guest_input
from src.guests.features.manage_guests.read_model import GuestReadModel, SqlGuestReadModel
from src.guests.features.manage_guests.write_model import GuestWriteModel, SqlGuestWriteModel
from src.guests.urls import GUEST_URL, GUESTS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class GuestSubmit(BaseModel):
    name: str
    party_name: str | None = None
    email: str | None = None
    phone: str | None = None
    party_size: int = 1
    allow_plus_one: bool = False


class GuestResponse(BaseModel):
    id: UUID
    name: str
    party_name: str | None = None
    email: str | None = None
    phone: str | None = None
    party_size: int
    allow_plus_one: bool
    table_id: UUID | None = None

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestResponse":
        return cls(
            id=guest.id,
            name=guest.name,
            party_name=guest.party_name,
            email=guest.email,
            phone=guest.phone,
            party_size=guest.party_size,
            allow_plus_one=guest.allow_plus_one,
            table_id=guest.table_id,
        )


def get_guest_write_model() -> GuestWriteModel:
    return SqlGuestWriteModel()


def get_guest_read_model() -> GuestReadModel:
    return SqlGuestReadModel()


@router.get(GUESTS_URL, response_model=list[GuestResponse])
async def list_guests(
    context: TenantContext = Depends(get_tenant_context),
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> list[GuestResponse]:
    return [GuestResponse.from_dto(guest) for guest in await read_model.list_guests(context)]


@router.post(GUESTS_URL, response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
async def create_guest(
    request: GuestSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    guest = await write_model.create_guest(context, clean_guest_input(**request.model_dump()))
    return GuestResponse.from_dto(guest)


@router.put(GUEST_URL, response_model=GuestResponse)
async def update_guest(
    guest_id: UUID,
    request: GuestSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    guest = await write_model.update_guest(
        context, guest_id, clean_guest_input(**request.model_dump())
    )
    return GuestResponse.from_dto(guest)


@router.delete(GUEST_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_guest(
    guest_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> Response:
    await write_model.delete_guest(context, guest_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
