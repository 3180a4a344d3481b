from fastapi import APIRouter

from .features.create_wedding_site.router import router as create_wedding_site_router
from .features.set_rsvp_code.router import router as set_rsvp_code_router

router = APIRouter()

router.include_router(create_wedding_site_router)
router.include_router(set_rsvp_code_router)
