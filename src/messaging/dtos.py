import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from uuid import UUID

from src.exceptions import ValidationError
from src.guests.dtos import empty_to_none
from src.models.base import as_utc

URL_RE = re.compile(r"^https?://\S+$")
MAX_SUBJECT = 200


class MessageStatus(str, Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class BroadcastDTO:
    id: UUID
    wedding_id: UUID
    subject: str
    content: str
    status: MessageStatus
    recipient_count: int = 0
    cta_text: str | None = None
    cta_url: str | None = None
    scheduled_for: datetime | None = None
    sent_at: datetime | None = None
    error_message: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_message(cls, message) -> "BroadcastDTO":
        return cls(
            id=message.uuid,
            wedding_id=message.wedding_id,
            subject=message.subject,
            content=message.content,
            status=MessageStatus(message.status),
            recipient_count=message.recipient_count,
            cta_text=message.cta_text,
            cta_url=message.cta_url,
            scheduled_for=as_utc(message.scheduled_for),
            sent_at=as_utc(message.sent_at),
            error_message=message.error_message,
            created_at=as_utc(message.created_at),
        )


@dataclass(frozen=True)
class BroadcastInputDTO:
    subject: str
    content: str
    cta_text: str | None = None
    cta_url: str | None = None


@dataclass(frozen=True)
class RecipientDTO:
    name: str
    email: str


def clean_broadcast_input(
    subject: str | None,
    content: str | None,
    cta_text: str | None = None,
    cta_url: str | None = None,
) -> BroadcastInputDTO:
    errors = {}
    subject = empty_to_none(subject)
    content = empty_to_none(content)
    cta_url = empty_to_none(cta_url)
    if subject is None:
        errors["subject"] = "Subject is required"
    elif len(subject) > MAX_SUBJECT:
        errors["subject"] = f"Subject must be at most {MAX_SUBJECT} characters"
    if content is None:
        errors["content"] = "Message content is required"
    if cta_url is not None and not URL_RE.match(cta_url):
        errors["cta_url"] = "Invalid URL"
    if errors:
        raise ValidationError(field_errors=errors)
    return BroadcastInputDTO(
        subject=subject,
        content=content,
        cta_text=empty_to_none(cta_text),
        cta_url=cta_url,
    )


def validate_schedule(scheduled_for: datetime, now: datetime, max_days: int) -> datetime:
    """``scheduled_for`` in UTC, rejected unless it lies in (now, now + max_days]."""
    scheduled_for = as_utc(scheduled_for)
    now = as_utc(now)
    if scheduled_for <= now:
        raise ValidationError(
            field_errors={"scheduled_for": "Scheduled time must be in the future"}
        )
    if scheduled_for > now + timedelta(days=max_days):
        raise ValidationError(
            field_errors={"scheduled_for": f"Scheduled time must be within {max_days} days"}
        )
    return scheduled_for
