from fastapi import APIRouter

from .features.invitations.router import router as invitations_router
from .features.manage_events.router import router as manage_events_router
from .features.visible_events.router import router as visible_events_router

router = APIRouter()

router.include_router(manage_events_router)
router.include_router(invitations_router)
router.include_router(visible_events_router)
