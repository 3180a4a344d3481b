import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.registry.dtos import PaymentSettingsDTO
from src.tenants.dtos import TenantContext
from src.tenants.repository.orm_models import Wedding

logger = logging.getLogger(__name__)


class PaymentSettingsWriteModel(ABC):
    @abstractmethod
    async def update_payment_settings(
        self, context: TenantContext, settings: PaymentSettingsDTO
    ) -> PaymentSettingsDTO:
        raise NotImplementedError


class SqlPaymentSettingsWriteModel(PaymentSettingsWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def update_payment_settings(
        self, context: TenantContext, settings: PaymentSettingsDTO
    ) -> PaymentSettingsDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            await session.execute(
                update(Wedding)
                .where(Wedding.uuid == context.wedding_id)
                .values(payment_settings=settings.to_json())
                .execution_options(synchronize_session=False)
            )
        logger.info("Updated payment settings of wedding %s", context.wedding_id)
        return settings
