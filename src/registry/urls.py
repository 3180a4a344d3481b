GIFTS_URL = "/api/v1/dashboard/registry/gifts"
GIFT_URL = "/api/v1/dashboard/registry/gifts/{gift_id}"
REORDER_GIFTS_URL = "/api/v1/dashboard/registry/gifts/reorder"
PAYMENT_SETTINGS_URL = "/api/v1/dashboard/registry/payment-settings"

SITE_GIFTS_URL = "/api/v1/sites/{subdomain}/registry"
SITE_GIFT_PAYMENT_URL = "/api/v1/sites/{subdomain}/registry/{gift_id}/payment"
CLAIM_GIFT_URL = "/api/v1/sites/{subdomain}/registry/{gift_id}/claim"

EXTERNAL_REGISTRIES_URL = "/api/v1/dashboard/registry/external"
EXTERNAL_REGISTRY_URL = "/api/v1/dashboard/registry/external/{registry_id}"
REORDER_EXTERNAL_REGISTRIES_URL = "/api/v1/dashboard/registry/external/reorder"
SITE_EXTERNAL_REGISTRIES_URL = "/api/v1/sites/{subdomain}/registry/external"
