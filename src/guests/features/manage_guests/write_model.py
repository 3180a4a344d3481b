"""Write model for the couple's guest list.

Every statement filters on the wedding of the TenantContext, so a guest id
from another wedding behaves exactly like an unknown id.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.repository.orm_models import EventGuest
from src.exceptions import NotFound
from src.guests.dtos import GuestDTO, GuestInputDTO
from src.guests.repository.orm_models import Guest
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class GuestWriteModel(ABC):
    @abstractmethod
    async def create_guest(self, context: TenantContext, data: GuestInputDTO) -> GuestDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_guest(
        self, context: TenantContext, guest_id: UUID, data: GuestInputDTO
    ) -> GuestDTO:
        """Raises NotFound when the guest is not part of the wedding."""
        raise NotImplementedError

    @abstractmethod
    async def delete_guest(self, context: TenantContext, guest_id: UUID) -> None:
        """Delete a guest together with all of their event invitations."""
        raise NotImplementedError


class SqlGuestWriteModel(GuestWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_guest(self, context: TenantContext, data: GuestInputDTO) -> GuestDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = Guest(
                wedding_id=context.wedding_id,
                name=data.name,
                party_name=data.party_name,
                email=data.email,
                phone=data.phone,
                party_size=data.party_size,
                allow_plus_one=data.allow_plus_one,
            )
            session.add(guest)
            await session.flush()
            return GuestDTO.from_guest(guest)

    async def update_guest(
        self, context: TenantContext, guest_id: UUID, data: GuestInputDTO
    ) -> GuestDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = await self._get_guest(session, context, guest_id)
            guest.name = data.name
            guest.party_name = data.party_name
            guest.email = data.email
            guest.phone = data.phone
            guest.party_size = data.party_size
            guest.allow_plus_one = data.allow_plus_one
            await session.flush()
            return GuestDTO.from_guest(guest)

    async def delete_guest(self, context: TenantContext, guest_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = await self._get_guest(session, context, guest_id)
            await session.execute(delete(EventGuest).where(EventGuest.guest_id == guest.uuid))
            await session.delete(guest)
            await session.flush()
        logger.info("Deleted guest %s from wedding %s", guest_id, context.wedding_id)

    async def _get_guest(self, session, context: TenantContext, guest_id: UUID) -> Guest:
        result = await session.execute(
            select(Guest).where(Guest.uuid == guest_id, Guest.wedding_id == context.wedding_id)
        )
        guest = result.scalar_one_or_none()
        if guest is None:
            raise NotFound("Guest not found")
        return guest
