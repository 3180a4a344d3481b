from enum import Enum


class TableNames(str, Enum):
    TENANTS = "tenants"
    WEDDINGS = "weddings"
    USERS = "users"
    GUESTS = "guests"
    EVENTS = "events"
    EVENT_GUESTS = "event_guests"
    SEATING_TABLES = "seating_tables"
    GIFT_ITEMS = "gift_items"
    EXTERNAL_REGISTRIES = "external_registries"
    BROADCAST_MESSAGES = "broadcast_messages"
    GUEST_PHOTOS = "guest_photos"
