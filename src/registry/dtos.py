import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from uuid import UUID

from src.exceptions import ValidationError
from src.guests.dtos import empty_to_none
from src.models.base import as_utc

IBAN_RE = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]+$")
MAX_GIFT_NAME = 100
MAX_GIFT_DESCRIPTION = 500
MAX_REGISTRY_NAME = 50
MAX_REGISTRY_DESCRIPTION = 200
URL_RE = re.compile(r"^https?://\S+$")


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    PAYPAL = "paypal"
    TWINT = "twint"


class BankCurrency(str, Enum):
    EUR = "EUR"
    CHF = "CHF"


@dataclass(frozen=True)
class GiftDTO:
    id: UUID
    name: str
    target_amount: Decimal
    description: str | None = None
    image_url: str | None = None
    order: int = 0
    is_claimed: bool = False
    claimed_by: str | None = None
    claimed_at: datetime | None = None

    @classmethod
    def from_gift(cls, gift) -> "GiftDTO":
        return cls(
            id=gift.uuid,
            name=gift.name,
            target_amount=Decimal(gift.target_amount),
            description=gift.description,
            image_url=gift.image_url,
            order=gift.order,
            is_claimed=gift.is_claimed,
            claimed_by=gift.claimed_by,
            claimed_at=as_utc(gift.claimed_at),
        )


@dataclass(frozen=True)
class GiftInputDTO:
    name: str
    target_amount: Decimal
    description: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class ExternalRegistryDTO:
    id: UUID
    name: str
    url: str
    description: str | None = None
    order: int = 0

    @classmethod
    def from_registry(cls, registry) -> "ExternalRegistryDTO":
        return cls(
            id=registry.uuid,
            name=registry.name,
            url=registry.url,
            description=registry.description,
            order=registry.order,
        )


@dataclass(frozen=True)
class ExternalRegistryInputDTO:
    name: str
    url: str
    description: str | None = None


@dataclass(frozen=True)
class BankTransferDTO:
    account_name: str
    iban: str
    currency: BankCurrency = BankCurrency.EUR
    bic: str | None = None


@dataclass(frozen=True)
class PayPalDTO:
    username: str
    currency: str | None = None


@dataclass(frozen=True)
class TwintDTO:
    display_text: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class PaymentSettingsDTO:
    enabled: bool = False
    method: PaymentMethod | None = None
    bank_transfer: BankTransferDTO | None = None
    paypal: PayPalDTO | None = None
    twint: TwintDTO | None = None

    def to_json(self) -> dict:
        data = {"enabled": self.enabled, "method": self.method.value if self.method else None}
        if self.bank_transfer:
            data["bank_transfer"] = {
                "account_name": self.bank_transfer.account_name,
                "iban": self.bank_transfer.iban,
                "bic": self.bank_transfer.bic,
                "currency": self.bank_transfer.currency.value,
            }
        if self.paypal:
            data["paypal"] = {"username": self.paypal.username, "currency": self.paypal.currency}
        if self.twint:
            data["twint"] = {
                "display_text": self.twint.display_text,
                "phone_number": self.twint.phone_number,
            }
        return data

    @classmethod
    def from_json(cls, raw: dict | None) -> "PaymentSettingsDTO":
        if not raw:
            return cls()
        bank = raw.get("bank_transfer")
        paypal = raw.get("paypal")
        twint = raw.get("twint")
        return cls(
            enabled=bool(raw.get("enabled")),
            method=PaymentMethod(raw["method"]) if raw.get("method") else None,
            bank_transfer=BankTransferDTO(
                account_name=bank["account_name"],
                iban=bank["iban"],
                bic=bank.get("bic"),
                currency=BankCurrency(bank.get("currency") or "EUR"),
            )
            if bank
            else None,
            paypal=PayPalDTO(username=paypal["username"], currency=paypal.get("currency"))
            if paypal
            else None,
            twint=TwintDTO(
                display_text=twint.get("display_text"), phone_number=twint.get("phone_number")
            )
            if twint
            else None,
        )


def clean_gift_input(
    name: str | None,
    target_amount: Decimal | str | float | None,
    description: str | None = None,
    image_url: str | None = None,
) -> GiftInputDTO:
    errors = {}
    name = empty_to_none(name)
    description = empty_to_none(description)
    if name is None:
        errors["name"] = "Gift name is required"
    elif len(name) > MAX_GIFT_NAME:
        errors["name"] = f"Gift name must be at most {MAX_GIFT_NAME} characters"
    if description is not None and len(description) > MAX_GIFT_DESCRIPTION:
        errors["description"] = f"Description must be at most {MAX_GIFT_DESCRIPTION} characters"
    try:
        amount = Decimal(str(target_amount)).quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError):
        amount = None
    if amount is None or not amount.is_finite() or amount <= 0:
        errors["target_amount"] = "Amount must be a positive number"
    if errors:
        raise ValidationError(field_errors=errors)
    return GiftInputDTO(
        name=name,
        target_amount=amount,
        description=description,
        image_url=empty_to_none(image_url),
    )


def clean_external_registry_input(
    name: str | None, url: str | None, description: str | None = None
) -> ExternalRegistryInputDTO:
    errors = {}
    name = empty_to_none(name)
    url = empty_to_none(url)
    description = empty_to_none(description)
    if name is None:
        errors["name"] = "Name is required"
    elif len(name) > MAX_REGISTRY_NAME:
        errors["name"] = f"Name must be at most {MAX_REGISTRY_NAME} characters"
    if url is None or not URL_RE.match(url):
        errors["url"] = "Must be a valid URL"
    if description is not None and len(description) > MAX_REGISTRY_DESCRIPTION:
        errors["description"] = (
            f"Description must be at most {MAX_REGISTRY_DESCRIPTION} characters"
        )
    if errors:
        raise ValidationError(field_errors=errors)
    return ExternalRegistryInputDTO(name=name, url=url, description=description)


def clean_payment_settings(
    enabled: bool,
    method: str | None,
    bank_transfer: dict | None = None,
    paypal: dict | None = None,
    twint: dict | None = None,
) -> PaymentSettingsDTO:
    """Validate payment settings, keeping only the details of the chosen method."""
    errors = {}
    try:
        method = PaymentMethod(method) if method else None
    except ValueError as e:
        raise ValidationError(field_errors={"method": "Unknown payment method"}) from e

    bank_dto = paypal_dto = twint_dto = None
    if method is PaymentMethod.BANK_TRANSFER:
        bank_transfer = bank_transfer or {}
        account_name = empty_to_none(bank_transfer.get("account_name"))
        iban = re.sub(r"\s", "", bank_transfer.get("iban") or "").upper()
        bic = empty_to_none(bank_transfer.get("bic"))
        currency = bank_transfer.get("currency") or "EUR"
        if account_name is None:
            errors["bank_transfer.account_name"] = "Account name is required"
        elif len(account_name) > 70:
            errors["bank_transfer.account_name"] = "Account name must be at most 70 characters"
        if len(iban) < 15:
            errors["bank_transfer.iban"] = "IBAN too short"
        elif len(iban) > 34:
            errors["bank_transfer.iban"] = "IBAN too long"
        elif not IBAN_RE.match(iban):
            errors["bank_transfer.iban"] = "Invalid IBAN format"
        if bic is not None and len(bic) > 11:
            errors["bank_transfer.bic"] = "BIC must be at most 11 characters"
        if currency not in {c.value for c in BankCurrency}:
            errors["bank_transfer.currency"] = "Currency must be EUR or CHF"
        if not errors:
            bank_dto = BankTransferDTO(
                account_name=account_name,
                iban=iban,
                bic=bic.upper() if bic else None,
                currency=BankCurrency(currency),
            )
    elif method is PaymentMethod.PAYPAL:
        paypal = paypal or {}
        username = empty_to_none(paypal.get("username"))
        currency = empty_to_none(paypal.get("currency"))
        if username is None:
            errors["paypal.username"] = "PayPal username is required"
        elif len(username) > 50:
            errors["paypal.username"] = "PayPal username must be at most 50 characters"
        if currency is not None and len(currency) != 3:
            errors["paypal.currency"] = "Currency must be a 3 letter code"
        if not errors:
            paypal_dto = PayPalDTO(username=username, currency=currency.upper() if currency else None)
    elif method is PaymentMethod.TWINT:
        twint = twint or {}
        twint_dto = TwintDTO(
            display_text=empty_to_none(twint.get("display_text")),
            phone_number=empty_to_none(twint.get("phone_number")),
        )

    if errors:
        raise ValidationError(field_errors=errors)
    return PaymentSettingsDTO(
        enabled=enabled,
        method=method,
        bank_transfer=bank_dto,
        paypal=paypal_dto,
        twint=twint_dto,
    )
