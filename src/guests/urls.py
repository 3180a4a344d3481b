GUESTS_URL = "/api/v1/dashboard/guests"
GUEST_URL = "/api/v1/dashboard/guests/{guest_id}"
IMPORT_GUESTS_URL = "/api/v1/dashboard/guests/import"
