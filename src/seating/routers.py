from fastapi import APIRouter

from .features.assign_guest.router import router as assign_guest_router
from .features.export_seating.router import router as export_seating_router
from .features.manage_tables.router import router as manage_tables_router
from .features.seating_chart.router import router as seating_chart_router

router = APIRouter()

router.include_router(seating_chart_router)
router.include_router(export_seating_router)
router.include_router(manage_tables_router)
router.include_router(assign_guest_router)
