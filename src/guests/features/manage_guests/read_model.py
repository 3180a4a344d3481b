import abc

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.guests.dtos import GuestDTO
from src.guests.repository.orm_models import Guest
from src.tenants.dtos import TenantContext


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_guests(self, context: TenantContext) -> list[GuestDTO]:
        """All guests of the wedding, sorted case-insensitively by name."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    async def list_guests(self, context: TenantContext) -> list[GuestDTO]:
        async with async_session_manager() as session:
            result = await session.execute(
                select(Guest)
                .where(Guest.wedding_id == context.wedding_id)
                .order_by(func.lower(Guest.name), Guest.uuid)
            )
            return [GuestDTO.from_guest(guest) for guest in result.scalars().all()]
