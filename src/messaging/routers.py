from fastapi import APIRouter

from .features.list_broadcasts.router import router as list_broadcasts_router
from .features.schedule_broadcast.router import router as schedule_broadcast_router
from .features.send_broadcast.router import router as send_broadcast_router

router = APIRouter()

router.include_router(send_broadcast_router)
router.include_router(schedule_broadcast_router)
router.include_router(list_broadcasts_router)
