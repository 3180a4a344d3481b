import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import Conflict
from src.tenants.dtos import TenantContext, validate_rsvp_code
from src.tenants.repository.orm_models import Wedding

logger = logging.getLogger(__name__)


class RsvpCodeWriteModel(ABC):
    @abstractmethod
    async def set_rsvp_code(self, context: TenantContext, code: str) -> str:
        """Set or replace the wedding's RSVP code.

        Raises:
            ValidationError: code is not 4-20 alphanumeric characters
            Conflict: another wedding already uses the code (nothing is changed)
        """
        raise NotImplementedError


class SqlRsvpCodeWriteModel(RsvpCodeWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def set_rsvp_code(self, context: TenantContext, code: str) -> str:
        code = validate_rsvp_code(code)

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Wedding.uuid).where(Wedding.rsvp_code == code))
            owner = result.scalar_one_or_none()
            if owner is not None and owner != context.wedding_id:
                raise Conflict("This RSVP code is already in use")

            try:
                await session.execute(
                    update(Wedding)
                    .where(Wedding.uuid == context.wedding_id)
                    .values(rsvp_code=code)
                )
                await session.flush()
            except IntegrityError as e:
                raise Conflict("This RSVP code is already in use") from e

        logger.info("RSVP code updated for wedding %s", context.wedding_id)
        return code
