import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from src.exceptions import ValidationError
from src.guests.dtos import empty_to_none
from src.models.base import as_utc

MEAL_ID_RE = re.compile(r"[^a-z0-9]+")


class RsvpStatus(str, Enum):
    ATTENDING = "ATTENDING"
    DECLINED = "DECLINED"
    MAYBE = "MAYBE"


@dataclass(frozen=True)
class MealOptionDTO:
    id: str
    name: str
    description: str | None = None

    def to_json(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class EventDTO:
    id: UUID
    name: str
    date_time: datetime
    description: str | None = None
    end_time: datetime | None = None
    location: str | None = None
    address: str | None = None
    dress_code: str | None = None
    is_public: bool = True
    meal_options: list[MealOptionDTO] = field(default_factory=list)
    order: int = 0

    @property
    def meal_option_ids(self) -> set[str]:
        return {option.id for option in self.meal_options}

    @classmethod
    def from_event(cls, event) -> "EventDTO":
        return cls(
            id=event.uuid,
            name=event.name,
            date_time=as_utc(event.date_time),
            description=event.description,
            end_time=as_utc(event.end_time),
            location=event.location,
            address=event.address,
            dress_code=event.dress_code,
            is_public=event.is_public,
            meal_options=meal_options_from_json(event.meal_options),
            order=event.order,
        )


@dataclass(frozen=True)
class EventInputDTO:
    name: str
    date_time: datetime
    description: str | None = None
    end_time: datetime | None = None
    location: str | None = None
    address: str | None = None
    dress_code: str | None = None
    is_public: bool = True


@dataclass(frozen=True)
class InvitationResultDTO:
    sent: int
    skipped: int
    failed: int = 0


def meal_options_from_json(raw: list | None) -> list[MealOptionDTO]:
    return [
        MealOptionDTO(id=item["id"], name=item["name"], description=item.get("description"))
        for item in raw or []
    ]


def slugify_meal_name(name: str) -> str:
    return MEAL_ID_RE.sub("-", name.strip().lower()).strip("-")


def clean_meal_options(options: list[dict]) -> list[MealOptionDTO]:
    """Validate a meal option list, generating ids from names where missing.

    Names must be non-empty and ids unique within the event.
    """
    cleaned = []
    seen_ids = set()
    for index, option in enumerate(options):
        name = empty_to_none(option.get("name"))
        if name is None:
            raise ValidationError(
                field_errors={f"meal_options.{index}.name": "Meal option name is required"}
            )
        option_id = empty_to_none(option.get("id")) or slugify_meal_name(name)
        if option_id in seen_ids:
            raise ValidationError(
                field_errors={f"meal_options.{index}.id": "Meal option ids must be unique"}
            )
        seen_ids.add(option_id)
        cleaned.append(
            MealOptionDTO(
                id=option_id, name=name, description=empty_to_none(option.get("description"))
            )
        )
    return cleaned


def clean_event_input(
    name: str | None,
    date_time: datetime | None,
    description: str | None = None,
    end_time: datetime | None = None,
    location: str | None = None,
    address: str | None = None,
    dress_code: str | None = None,
    is_public: bool = True,
) -> EventInputDTO:
    errors = {}
    name = empty_to_none(name)
    if name is None:
        errors["name"] = "Event name is required"
    if date_time is None:
        errors["date_time"] = "Date and time are required"
    elif end_time is not None and as_utc(end_time) < as_utc(date_time):
        errors["end_time"] = "End time must be after the start time"
    if errors:
        raise ValidationError(field_errors=errors)
    return EventInputDTO(
        name=name,
        date_time=as_utc(date_time),
        description=empty_to_none(description),
        end_time=as_utc(end_time),
        location=empty_to_none(location),
        address=empty_to_none(address),
        dress_code=empty_to_none(dress_code),
        is_public=is_public,
    )
