from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.events.dtos import EventDTO, RsvpStatus
from src.exceptions import ValidationError
from src.guests.dtos import empty_to_none
from src.models.base import as_utc
from src.rsvp.aggregation import RsvpStats

MAX_PLUS_ONES = 10
MAX_DIETARY_NOTES = 500
SUBMITTABLE_STATUSES = (RsvpStatus.ATTENDING, RsvpStatus.DECLINED)


@dataclass(frozen=True)
class RsvpSubmissionDTO:
    event_id: UUID
    rsvp_status: RsvpStatus
    plus_one_count: int | None = None
    plus_one_name: str | None = None
    meal_choice: str | None = None
    dietary_notes: str | None = None


@dataclass(frozen=True)
class RsvpResponseDTO:
    """A guest's current answer for one event."""

    rsvp_status: RsvpStatus | None = None
    rsvp_at: datetime | None = None
    plus_one_count: int | None = None
    plus_one_name: str | None = None
    meal_choice: str | None = None
    dietary_notes: str | None = None

    @classmethod
    def from_event_guest(cls, invitation) -> "RsvpResponseDTO":
        return cls(
            rsvp_status=invitation.rsvp_status,
            rsvp_at=as_utc(invitation.rsvp_at),
            plus_one_count=invitation.plus_one_count,
            plus_one_name=invitation.plus_one_name,
            meal_choice=invitation.meal_choice,
            dietary_notes=invitation.dietary_notes,
        )


@dataclass(frozen=True)
class GuestEventDTO:
    event: EventDTO
    current_rsvp: RsvpResponseDTO


@dataclass(frozen=True)
class GuestWithEventsDTO:
    id: UUID
    name: str
    allow_plus_one: bool
    events: list[GuestEventDTO] = field(default_factory=list)


@dataclass(frozen=True)
class GuestSearchResultDTO:
    id: UUID
    name: str
    party_name: str | None = None


@dataclass(frozen=True)
class EventRsvpStatsDTO:
    event_id: UUID
    event_name: str
    event_date: datetime
    stats: RsvpStats


@dataclass(frozen=True)
class EventResponseDTO:
    event_id: UUID
    event_name: str
    rsvp_status: RsvpStatus | None
    plus_one_count: int | None = None
    meal_choice: str | None = None
    dietary_notes: str | None = None


@dataclass(frozen=True)
class RsvpGuestDTO:
    id: UUID
    name: str
    party_name: str | None = None
    email: str | None = None
    phone: str | None = None
    event_responses: list[EventResponseDTO] = field(default_factory=list)


def clean_rsvp_submission(
    event_id: UUID,
    rsvp_status: str | None,
    plus_one_count: int | None = None,
    plus_one_name: str | None = None,
    meal_choice: str | None = None,
    dietary_notes: str | None = None,
) -> RsvpSubmissionDTO:
    """Validate an RSVP form.

    Whether ``meal_choice`` is one of the event's options is checked by the
    write model, which has the event at hand.
    """
    errors = {}
    try:
        status = RsvpStatus(rsvp_status)
    except ValueError:
        status = None
    if status not in SUBMITTABLE_STATUSES:
        errors["rsvp_status"] = "Please choose whether you will attend"
    if plus_one_count is not None and not 0 <= plus_one_count <= MAX_PLUS_ONES:
        errors["plus_one_count"] = f"Plus ones must be between 0 and {MAX_PLUS_ONES}"
    dietary_notes = empty_to_none(dietary_notes)
    if dietary_notes is not None and len(dietary_notes) > MAX_DIETARY_NOTES:
        errors["dietary_notes"] = f"Dietary notes must be at most {MAX_DIETARY_NOTES} characters"
    if errors:
        raise ValidationError(field_errors=errors)
    return RsvpSubmissionDTO(
        event_id=event_id,
        rsvp_status=status,
        plus_one_count=plus_one_count,
        plus_one_name=empty_to_none(plus_one_name),
        meal_choice=empty_to_none(meal_choice),
        dietary_notes=dietary_notes,
    )
