BROADCASTS_URL = "/api/v1/dashboard/messages"
BROADCAST_URL = "/api/v1/dashboard/messages/{message_id}"
SEND_BROADCAST_URL = "/api/v1/dashboard/messages/send"
SCHEDULE_BROADCAST_URL = "/api/v1/dashboard/messages/schedule"
CANCEL_BROADCAST_URL = "/api/v1/dashboard/messages/{message_id}/cancel"
