from fastapi import APIRouter

from .features.gallery.router import router as gallery_router
from .features.moderate_photos.router import router as moderate_photos_router
from .features.photo_settings.router import router as photo_settings_router
from .features.photo_stats.router import router as photo_stats_router
from .features.submit_photo.router import router as submit_photo_router

router = APIRouter()

# fixed paths before the {photo_id} routes
router.include_router(photo_stats_router)
router.include_router(photo_settings_router)
router.include_router(gallery_router)
router.include_router(moderate_photos_router)
router.include_router(submit_photo_router)
