RSVP_VALIDATE_CODE_URL = "/api/v1/sites/{subdomain}/rsvp/code"
RSVP_SEARCH_URL = "/api/v1/sites/{subdomain}/rsvp/guests"
RSVP_GUEST_URL = "/api/v1/sites/{subdomain}/rsvp/guests/{guest_id}"
RSVP_SUBMIT_URL = "/api/v1/sites/{subdomain}/rsvp/guests/{guest_id}/responses"

RSVP_STATS_URL = "/api/v1/dashboard/rsvp/stats"
RSVP_EVENT_STATS_URL = "/api/v1/dashboard/rsvp/stats/events"
RSVP_GUEST_LIST_URL = "/api/v1/dashboard/rsvp/guests"
RSVP_REMINDERS_URL = "/api/v1/dashboard/rsvp/reminders"
RSVP_EXPORT_URL = "/api/v1/dashboard/rsvp/export"
