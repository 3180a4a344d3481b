from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.exceptions import NotFound
from src.registry.dtos import GiftDTO, PaymentMethod
from src.registry.features.manage_gifts.read_model import GiftReadModel
from src.registry.features.manage_gifts.router import get_gift_read_model
from src.registry.features.payment_settings.read_model import PaymentSettingsReadModel
from src.registry.features.payment_settings.router import get_payment_settings_read_model
from src.registry.payment import generate_payment_data, gift_reference
from src.registry.urls import SITE_GIFT_PAYMENT_URL, SITE_GIFTS_URL
from src.tenants.dependencies import get_site
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


class PublicGiftResponse(BaseModel):
    id: UUID
    name: str
    target_amount: Decimal
    description: str | None = None
    image_url: str | None = None
    is_claimed: bool

    @classmethod
    def from_dto(cls, gift: GiftDTO) -> "PublicGiftResponse":
        return cls(
            id=gift.id,
            name=gift.name,
            target_amount=gift.target_amount,
            description=gift.description,
            image_url=gift.image_url,
            is_claimed=gift.is_claimed,
        )


class GiftPaymentResponse(BaseModel):
    gift: PublicGiftResponse
    method: PaymentMethod | None = None
    reference: str
    payment_data: str | None = None
    display_text: str | None = None


@router.get(SITE_GIFTS_URL, response_model=list[PublicGiftResponse])
async def list_public_gifts(
    site: WeddingSiteDTO = Depends(get_site),
    read_model: GiftReadModel = Depends(get_gift_read_model),
) -> list[PublicGiftResponse]:
    return [PublicGiftResponse.from_dto(gift) for gift in await read_model.list_gifts(site.context)]


@router.get(SITE_GIFT_PAYMENT_URL, response_model=GiftPaymentResponse)
async def get_gift_payment(
    gift_id: UUID,
    site: WeddingSiteDTO = Depends(get_site),
    gift_read_model: GiftReadModel = Depends(get_gift_read_model),
    settings_read_model: PaymentSettingsReadModel = Depends(get_payment_settings_read_model),
) -> GiftPaymentResponse:
    """
    Payment instructions for one gift.
    ``payment_data`` is the string to render as a QR code or link, null when
    the chosen method has none.
    """
    gift = await gift_read_model.get_gift(site.context, gift_id)
    if gift is None:
        raise NotFound("Gift not found")
    settings = await settings_read_model.get_payment_settings(site.context)
    reference = gift_reference(gift.name)
    return GiftPaymentResponse(
        gift=PublicGiftResponse.from_dto(gift),
        method=settings.method if settings.enabled else None,
        reference=reference,
        payment_data=generate_payment_data(settings, gift.target_amount, reference),
        display_text=settings.twint.display_text
        if settings.enabled and settings.method is PaymentMethod.TWINT and settings.twint
        else None,
    )
