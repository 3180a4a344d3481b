PHOTOS_URL = "/api/v1/dashboard/photos"
PHOTO_URL = "/api/v1/dashboard/photos/{photo_id}"
MODERATE_PHOTO_URL = "/api/v1/dashboard/photos/{photo_id}/moderate"
BULK_MODERATE_URL = "/api/v1/dashboard/photos/moderate"
PHOTO_STATS_URL = "/api/v1/dashboard/photos/stats"
PHOTO_SETTINGS_URL = "/api/v1/dashboard/photos/settings"

SITE_PHOTOS_URL = "/api/v1/sites/{subdomain}/photos"
