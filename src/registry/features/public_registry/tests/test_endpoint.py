from decimal import Decimal
from uuid import uuid4

from src.exceptions import Conflict
from src.registry.dtos import (
    BankTransferDTO,
    GiftDTO,
    PaymentMethod,
    PaymentSettingsDTO,
    TwintDTO,
)
from src.registry.features.claim_gift.router import get_gift_claim_write_model
from src.registry.features.claim_gift.write_model import GiftClaimWriteModel
from src.registry.features.manage_gifts.read_model import GiftReadModel
from src.registry.features.manage_gifts.router import get_gift_read_model
from src.registry.features.payment_settings.read_model import PaymentSettingsReadModel
from src.registry.features.payment_settings.router import get_payment_settings_read_model
from src.registry.urls import CLAIM_GIFT_URL, SITE_GIFT_PAYMENT_URL, SITE_GIFTS_URL
from src.tenants.dependencies import get_site

TOASTER = GiftDTO(id=uuid4(), name="Toaster", target_amount=Decimal("50"), order=1)
VASE = GiftDTO(
    id=uuid4(),
    name="Vase",
    target_amount=Decimal("30"),
    order=2,
    is_claimed=True,
    claimed_by="Aunt Mary",
)


class StaticGiftReadModel(GiftReadModel):
    async def list_gifts(self, context):
        return [TOASTER, VASE]

    async def get_gift(self, context, gift_id):
        return {TOASTER.id: TOASTER, VASE.id: VASE}.get(gift_id)


class StaticPaymentSettingsReadModel(PaymentSettingsReadModel):
    def __init__(self, settings):
        self.settings = settings

    async def get_payment_settings(self, context):
        return self.settings


class FirstComeClaimWriteModel(GiftClaimWriteModel):
    def __init__(self):
        self.claimed = set()

    async def claim_gift(self, context, gift_id, claimant_name=None):
        if gift_id in self.claimed:
            raise Conflict("This gift has already been claimed")
        self.claimed.add(gift_id)
        return GiftDTO(
            id=gift_id,
            name="Toaster",
            target_amount=Decimal("50"),
            is_claimed=True,
            claimed_by=claimant_name,
        )


def overrides_for(site, settings=PaymentSettingsDTO(), claims=None):
    return {
        get_site: lambda: site,
        get_gift_read_model: StaticGiftReadModel,
        get_payment_settings_read_model: lambda: StaticPaymentSettingsReadModel(settings),
        get_gift_claim_write_model: lambda: claims or FirstComeClaimWriteModel(),
    }


async def test_public_registry_hides_claimant(client_factory, site):
    async with client_factory(overrides_for(site)) as client:
        response = await client.get(SITE_GIFTS_URL.format(subdomain=site.subdomain))

    assert response.status_code == 200
    gifts = response.json()
    assert [gift["name"] for gift in gifts] == ["Toaster", "Vase"]
    assert gifts[1]["is_claimed"] is True
    assert "claimed_by" not in gifts[1]


async def test_gift_payment_with_bank_transfer(client_factory, site):
    settings = PaymentSettingsDTO(
        enabled=True,
        method=PaymentMethod.BANK_TRANSFER,
        bank_transfer=BankTransferDTO(account_name="Anna", iban="DE89370400440532013000"),
    )

    async with client_factory(overrides_for(site, settings)) as client:
        response = await client.get(
            SITE_GIFT_PAYMENT_URL.format(subdomain=site.subdomain, gift_id=TOASTER.id)
        )
        missing = await client.get(
            SITE_GIFT_PAYMENT_URL.format(subdomain=site.subdomain, gift_id=uuid4())
        )

    body = response.json()
    assert body["method"] == "bank_transfer"
    assert body["reference"] == "Gift: Toaster"
    assert body["payment_data"].startswith("BCD\n002\n1\nSCT\n")
    assert body["display_text"] is None
    assert missing.status_code == 404


async def test_gift_payment_with_twint(client_factory, site):
    settings = PaymentSettingsDTO(
        enabled=True,
        method=PaymentMethod.TWINT,
        twint=TwintDTO(display_text="Twint to 079 123 45 67"),
    )

    async with client_factory(overrides_for(site, settings)) as client:
        response = await client.get(
            SITE_GIFT_PAYMENT_URL.format(subdomain=site.subdomain, gift_id=TOASTER.id)
        )

    assert response.json()["payment_data"] is None
    assert response.json()["display_text"] == "Twint to 079 123 45 67"


async def test_claim_gift_twice(client_factory, site):
    claims = FirstComeClaimWriteModel()
    url = CLAIM_GIFT_URL.format(subdomain=site.subdomain, gift_id=TOASTER.id)

    async with client_factory(overrides_for(site, claims=claims)) as client:
        first = await client.post(url, json={"claimant_name": "Alice"})
        second = await client.post(url, json={"claimant_name": "Bob"})

    assert first.status_code == 200
    assert first.json()["is_claimed"] is True
    assert second.status_code == 409
    assert second.json()["detail"] == "This gift has already been claimed"
