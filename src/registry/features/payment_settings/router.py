from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.registry.dtos import BankCurrency, PaymentMethod, PaymentSettingsDTO, clean_payment_settings
from src.registry.features.payment_settings.read_model import (
    PaymentSettingsReadModel,
    SqlPaymentSettingsReadModel,
)
from src.registry.features.payment_settings.write_model import (
    PaymentSettingsWriteModel,
    SqlPaymentSettingsWriteModel,
)
from src.registry.urls import PAYMENT_SETTINGS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class BankTransferSettings(BaseModel):
    account_name: str | None = None
    iban: str | None = None
    bic: str | None = None
    currency: str | None = None


class PayPalSettings(BaseModel):
    username: str | None = None
    currency: str | None = None


class TwintSettings(BaseModel):
    display_text: str | None = None
    phone_number: str | None = None


class PaymentSettingsSubmit(BaseModel):
    enabled: bool = False
    method: str | None = None
    bank_transfer: BankTransferSettings | None = None
    paypal: PayPalSettings | None = None
    twint: TwintSettings | None = None


class BankTransferResponse(BaseModel):
    account_name: str
    iban: str
    bic: str | None = None
    currency: BankCurrency


class PaymentSettingsResponse(BaseModel):
    enabled: bool
    method: PaymentMethod | None = None
    bank_transfer: BankTransferResponse | None = None
    paypal: PayPalSettings | None = None
    twint: TwintSettings | None = None

    @classmethod
    def from_dto(cls, settings: PaymentSettingsDTO) -> "PaymentSettingsResponse":
        bank = settings.bank_transfer
        return cls(
            enabled=settings.enabled,
            method=settings.method,
            bank_transfer=BankTransferResponse(
                account_name=bank.account_name, iban=bank.iban, bic=bank.bic, currency=bank.currency
            )
            if bank
            else None,
            paypal=PayPalSettings(username=settings.paypal.username, currency=settings.paypal.currency)
            if settings.paypal
            else None,
            twint=TwintSettings(
                display_text=settings.twint.display_text, phone_number=settings.twint.phone_number
            )
            if settings.twint
            else None,
        )


def get_payment_settings_write_model() -> PaymentSettingsWriteModel:
    return SqlPaymentSettingsWriteModel()


def get_payment_settings_read_model() -> PaymentSettingsReadModel:
    return SqlPaymentSettingsReadModel()


@router.get(PAYMENT_SETTINGS_URL, response_model=PaymentSettingsResponse)
async def get_payment_settings(
    context: TenantContext = Depends(get_tenant_context),
    read_model: PaymentSettingsReadModel = Depends(get_payment_settings_read_model),
) -> PaymentSettingsResponse:
    return PaymentSettingsResponse.from_dto(await read_model.get_payment_settings(context))


@router.put(PAYMENT_SETTINGS_URL, response_model=PaymentSettingsResponse)
async def update_payment_settings(
    request: PaymentSettingsSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: PaymentSettingsWriteModel = Depends(get_payment_settings_write_model),
) -> PaymentSettingsResponse:
    settings = clean_payment_settings(
        enabled=request.enabled,
        method=request.method,
        bank_transfer=request.bank_transfer.model_dump() if request.bank_transfer else None,
        paypal=request.paypal.model_dump() if request.paypal else None,
        twint=request.twint.model_dump() if request.twint else None,
    )
    return PaymentSettingsResponse.from_dto(
        await write_model.update_payment_settings(context, settings)
    )
