EVENTS_URL = "/api/v1/dashboard/events"
EVENT_URL = "/api/v1/dashboard/events/{event_id}"
REORDER_EVENTS_URL = "/api/v1/dashboard/events/reorder"
MEAL_OPTIONS_URL = "/api/v1/dashboard/events/{event_id}/meal-options"
INVITE_GUESTS_URL = "/api/v1/dashboard/events/{event_id}/guests"
UNINVITE_GUESTS_URL = "/api/v1/dashboard/events/{event_id}/guests/remove"
SEND_INVITATIONS_URL = "/api/v1/dashboard/events/{event_id}/send-invitations"
SITE_EVENTS_URL = "/api/v1/sites/{subdomain}/events"
