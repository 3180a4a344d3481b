import abc

from sqlalchemy import select

from src.config.database import async_session_manager
from src.registry.dtos import PaymentSettingsDTO
from src.tenants.dtos import TenantContext
from src.tenants.repository.orm_models import Wedding


class PaymentSettingsReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_payment_settings(self, context: TenantContext) -> PaymentSettingsDTO:
        raise NotImplementedError


class SqlPaymentSettingsReadModel(PaymentSettingsReadModel):
    async def get_payment_settings(self, context: TenantContext) -> PaymentSettingsDTO:
        async with async_session_manager() as session:
            raw = await session.scalar(
                select(Wedding.payment_settings).where(Wedding.uuid == context.wedding_id)
            )
            return PaymentSettingsDTO.from_json(raw)
