from fastapi import APIRouter

from .features.import_guests.router import router as import_guests_router
from .features.manage_guests.router import router as manage_guests_router

router = APIRouter()

router.include_router(import_guests_router)
router.include_router(manage_guests_router)
