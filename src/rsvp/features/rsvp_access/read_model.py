import abc

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.guests.repository.orm_models import Guest
from src.rsvp.dtos import GuestSearchResultDTO
from src.tenants.dtos import TenantContext
from src.tenants.repository.orm_models import Wedding

MIN_SEARCH_LENGTH = 2
MAX_SEARCH_RESULTS = 10


class RsvpAccessReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_rsvp_code(self, context: TenantContext) -> str | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def search_guests(self, context: TenantContext, name: str) -> list[GuestSearchResultDTO]:
        """Case-insensitive substring search, at most ten matches.

        Queries shorter than two characters return nothing.
        """
        raise NotImplementedError


class SqlRsvpAccessReadModel(RsvpAccessReadModel):
    async def get_rsvp_code(self, context: TenantContext) -> str | None:
        async with async_session_manager() as session:
            return await session.scalar(
                select(Wedding.rsvp_code).where(Wedding.uuid == context.wedding_id)
            )

    async def search_guests(self, context: TenantContext, name: str) -> list[GuestSearchResultDTO]:
        name = (name or "").strip()
        if len(name) < MIN_SEARCH_LENGTH:
            return []
        pattern = "%" + name.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_") + "%"
        async with async_session_manager() as session:
            result = await session.execute(
                select(Guest)
                .where(
                    Guest.wedding_id == context.wedding_id,
                    func.lower(Guest.name).like(pattern, escape="\\"),
                )
                .order_by(Guest.name)
                .limit(MAX_SEARCH_RESULTS)
            )
            return [
                GuestSearchResultDTO(id=guest.uuid, name=guest.name, party_name=guest.party_name)
                for guest in result.scalars().all()
            ]
