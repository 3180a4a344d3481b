from fastapi import APIRouter

from .features.export_rsvps.router import router as export_rsvps_router
from .features.rsvp_access.router import router as rsvp_access_router
from .features.rsvp_dashboard.router import router as rsvp_dashboard_router
from .features.send_reminders.router import router as send_reminders_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(rsvp_access_router)
router.include_router(submit_rsvp_router)
router.include_router(rsvp_dashboard_router)
router.include_router(send_reminders_router)
router.include_router(export_rsvps_router)
