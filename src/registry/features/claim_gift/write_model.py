"""
Gift claiming.

A single conditional UPDATE (``... WHERE is_claimed = false``) decides the
winner, so concurrent claims on the same gift need no lock: the database
lets exactly one of them match a row.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.exceptions import Conflict, NotFound
from src.guests.dtos import empty_to_none
from src.models.base import utcnow
from src.registry.dtos import GiftDTO
from src.registry.repository.orm_models import GiftItem
from src.tenants.dtos import TenantContext

logger = logging.getLogger(__name__)

ANONYMOUS_CLAIMANT = "Anonymous"


class GiftClaimWriteModel(ABC):
    @abstractmethod
    async def claim_gift(
        self, context: TenantContext, gift_id: UUID, claimant_name: str | None = None
    ) -> GiftDTO:
        """Claim a gift for a guest.

        Raises:
            NotFound: the gift does not belong to the wedding
            Conflict: someone else claimed it first
        """
        raise NotImplementedError


class SqlGiftClaimWriteModel(GiftClaimWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def claim_gift(
        self, context: TenantContext, gift_id: UUID, claimant_name: str | None = None
    ) -> GiftDTO:
        claimed_by = (empty_to_none(claimant_name) or ANONYMOUS_CLAIMANT)[:255]

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                update(GiftItem)
                .where(
                    GiftItem.uuid == gift_id,
                    GiftItem.wedding_id == context.wedding_id,
                    GiftItem.is_claimed.is_(False),
                )
                .values(is_claimed=True, claimed_by=claimed_by, claimed_at=utcnow())
                .execution_options(synchronize_session=False)
            )

            if result.rowcount == 0:
                exists = await session.scalar(
                    select(GiftItem.uuid).where(
                        GiftItem.uuid == gift_id, GiftItem.wedding_id == context.wedding_id
                    )
                )
                if exists is None:
                    raise NotFound("Gift not found")
                logger.warning("Rejected claim on already claimed gift %s", gift_id)
                raise Conflict("This gift has already been claimed")

            gift = (
                await session.execute(
                    select(GiftItem)
                    .where(GiftItem.uuid == gift_id)
                    .execution_options(populate_existing=True)
                )
            ).scalar_one()
            logger.info("Gift %s claimed by %s", gift_id, claimed_by)
            return GiftDTO.from_gift(gift)
