ADMIN_WEDDING_SITES_URL = "/api/v1/admin/weddings"
RSVP_CODE_URL = "/api/v1/dashboard/rsvp-code"
SITE_URL = "/api/v1/sites/{subdomain}"
