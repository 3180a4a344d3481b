"""
Payment instructions for registry gifts.

Turns a wedding's payment settings into the string a guest scans or
follows to pay for a gift:

    EUR bank transfer  EPC (SEPA credit transfer) QR payload
    CHF bank transfer  plain text block, EPC does not cover CHF
    PayPal             paypal.me link with amount and currency
    Twint / disabled   None, nothing to encode

Only the payload is produced, rendering the QR image is left to the client.
"""

from decimal import Decimal

from src.registry.dtos import BankCurrency, BankTransferDTO, PaymentMethod, PaymentSettingsDTO

EPC_SERVICE_TAG = "BCD"
EPC_VERSION = "002"
EPC_CHARACTER_SET = "1"  # UTF-8
EPC_IDENTIFICATION = "SCT"
EPC_MAX_NAME = 70
EPC_MAX_REFERENCE = 140
DEFAULT_PAYPAL_CURRENCY = "USD"


def format_amount(amount: Decimal) -> str:
    """``50`` and ``50.5`` as ``50`` and ``50.50``."""
    amount = Decimal(amount).quantize(Decimal("0.01"))
    if amount == amount.to_integral_value():
        return str(amount.to_integral_value())
    return f"{amount:.2f}"


def epc_payload(bank: BankTransferDTO, amount: Decimal, reference: str) -> str:
    lines = [
        EPC_SERVICE_TAG,
        EPC_VERSION,
        EPC_CHARACTER_SET,
        EPC_IDENTIFICATION,
        bank.bic or "",
        bank.account_name[:EPC_MAX_NAME],
        bank.iban.replace(" ", ""),
        f"EUR{Decimal(amount).quantize(Decimal('0.01'))}",
        "",  # purpose
        "",  # structured reference
        reference[:EPC_MAX_REFERENCE],
    ]
    return "\n".join(lines)


def swiss_bank_transfer_text(bank: BankTransferDTO, amount: Decimal, reference: str) -> str:
    return (
        f"Bank: {bank.account_name}\n"
        f"IBAN: {bank.iban}\n"
        f"Amount: {format_amount(amount)} CHF\n"
        f"Ref: {reference}"
    )


def generate_payment_data(
    settings: PaymentSettingsDTO, amount: Decimal, reference: str
) -> str | None:
    if not settings.enabled or settings.method is None:
        return None

    if settings.method is PaymentMethod.BANK_TRANSFER:
        if settings.bank_transfer is None:
            return None
        if settings.bank_transfer.currency is BankCurrency.EUR:
            return epc_payload(settings.bank_transfer, amount, reference)
        return swiss_bank_transfer_text(settings.bank_transfer, amount, reference)

    if settings.method is PaymentMethod.PAYPAL:
        if settings.paypal is None:
            return None
        currency = settings.paypal.currency or DEFAULT_PAYPAL_CURRENCY
        return f"https://paypal.me/{settings.paypal.username}/{format_amount(amount)}{currency}"

    return None


def gift_reference(gift_name: str) -> str:
    return f"Gift: {gift_name}"
