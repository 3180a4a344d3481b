import abc
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func, select

from src.config.database import async_session_manager
from src.events.repository.orm_models import Event, EventGuest
from src.guests.repository.orm_models import Guest
from src.models.base import as_utc
from src.tenants.dtos import TenantContext


@dataclass(frozen=True)
class RsvpExportRowDTO:
    guest_name: str
    email: str | None
    phone: str | None
    party_name: str | None
    event_name: str
    rsvp_status: str | None
    plus_one_count: int | None
    plus_one_name: str | None
    meal_choice: str | None
    dietary_notes: str | None
    responded_at: datetime | None


class RsvpExportReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_export_rows(self, context: TenantContext) -> list[RsvpExportRowDTO]:
        """One row per invitation, guests sorted by name."""
        raise NotImplementedError


class SqlRsvpExportReadModel(RsvpExportReadModel):
    async def get_export_rows(self, context: TenantContext) -> list[RsvpExportRowDTO]:
        async with async_session_manager() as session:
            rows = (
                await session.execute(
                    select(Guest, EventGuest, Event.name)
                    .join(EventGuest, EventGuest.guest_id == Guest.uuid)
                    .join(Event, Event.uuid == EventGuest.event_id)
                    .where(Guest.wedding_id == context.wedding_id)
                    .order_by(func.lower(Guest.name), Guest.uuid, Event.date_time)
                )
            ).all()
            return [
                RsvpExportRowDTO(
                    guest_name=guest.name,
                    email=guest.email,
                    phone=guest.phone,
                    party_name=guest.party_name,
                    event_name=event_name,
                    rsvp_status=invitation.rsvp_status.value if invitation.rsvp_status else None,
                    plus_one_count=invitation.plus_one_count,
                    plus_one_name=invitation.plus_one_name,
                    meal_choice=invitation.meal_choice,
                    dietary_notes=invitation.dietary_notes,
                    responded_at=as_utc(invitation.rsvp_at),
                )
                for guest, invitation, event_name in rows
            ]
