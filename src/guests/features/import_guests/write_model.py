import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GuestInputDTO
from src.guests.repository.orm_models import Guest
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)


class GuestImportWriteModel(ABC):
    @abstractmethod
    async def import_guests(self, context: TenantContext, guests: list[GuestInputDTO]) -> int:
        """Insert the parsed guests, returns how many were created."""
        raise NotImplementedError


class SqlGuestImportWriteModel(GuestImportWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def import_guests(self, context: TenantContext, guests: list[GuestInputDTO]) -> int:
        if not guests:
            return 0
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            session.add_all(
                Guest(
                    wedding_id=context.wedding_id,
                    name=data.name,
                    party_name=data.party_name,
                    email=data.email,
                    phone=data.phone,
                    party_size=data.party_size,
                    allow_plus_one=data.allow_plus_one,
                )
                for data in guests
            )
            await session.flush()
        logger.info("Imported %d guests into wedding %s", len(guests), context.wedding_id)
        return len(guests)
