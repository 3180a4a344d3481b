from fastapi import APIRouter

from .features.claim_gift.router import router as claim_gift_router
from .features.external_registries.router import router as external_registries_router
from .features.manage_gifts.router import router as manage_gifts_router
from .features.payment_settings.router import router as payment_settings_router
from .features.public_registry.router import router as public_registry_router

router = APIRouter()

router.include_router(manage_gifts_router)
router.include_router(external_registries_router)
router.include_router(payment_settings_router)
router.include_router(public_registry_router)
router.include_router(claim_gift_router)
