from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.registry.features.claim_gift.write_model import (
    GiftClaimWriteModel,
    SqlGiftClaimWriteModel,
)
from src.registry.features.public_registry.router import PublicGiftResponse
from src.registry.urls import CLAIM_GIFT_URL
from src.tenants.dependencies import get_site
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


class ClaimGiftSubmit(BaseModel):
    claimant_name: str | None = None


def get_gift_claim_write_model() -> GiftClaimWriteModel:
    return SqlGiftClaimWriteModel()


@router.post(CLAIM_GIFT_URL, response_model=PublicGiftResponse)
async def claim_gift(
    gift_id: UUID,
    request: ClaimGiftSubmit,
    site: WeddingSiteDTO = Depends(get_site),
    write_model: GiftClaimWriteModel = Depends(get_gift_claim_write_model),
) -> PublicGiftResponse:
    """
    Claim a gift from the registry.
    Answers 409 when another guest claimed it first.
    """
    gift = await write_model.claim_gift(site.context, gift_id, request.claimant_name)
    return PublicGiftResponse.from_dto(gift)
