"""Imports every ORM module so ``BaseModel.metadata`` knows all tables.

Alembic autogenerate and the test schema setup both import this module.
"""

from src.events.repository.orm_models import Event, EventGuest
from src.guests.repository.orm_models import Guest
from src.messaging.repository.orm_models import BroadcastMessage
from src.models.base import BaseModel
from src.models.user import User
from src.photos.repository.orm_models import GuestPhoto
from src.registry.repository.orm_models import ExternalRegistry, GiftItem
from src.seating.repository.orm_models import SeatingTable
from src.tenants.repository.orm_models import Tenant, Wedding

metadata = BaseModel.metadata

__all__ = [
    "metadata",
    "BroadcastMessage",
    "Event",
    "EventGuest",
    "ExternalRegistry",
    "GiftItem",
    "Guest",
    "GuestPhoto",
    "SeatingTable",
    "Tenant",
    "User",
    "Wedding",
]
