import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from src.exceptions import ValidationError
from src.guests.dtos import empty_to_none
from src.models.base import as_utc

URL_RE = re.compile(r"^https?://\S+$")
ANONYMOUS_UPLOADER = "Anonymous"
MAX_CAPTION = 500


class PhotoStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ModerationAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def status(self) -> PhotoStatus:
        return PhotoStatus.APPROVED if self is ModerationAction.APPROVE else PhotoStatus.REJECTED


@dataclass(frozen=True)
class PhotoDTO:
    id: UUID
    url: str
    status: PhotoStatus
    uploader_name: str | None = None
    caption: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_photo(cls, photo) -> "PhotoDTO":
        return cls(
            id=photo.uuid,
            url=photo.url,
            status=PhotoStatus(photo.status),
            uploader_name=photo.uploader_name,
            caption=photo.caption,
            created_at=as_utc(photo.created_at),
        )


@dataclass(frozen=True)
class PhotoStatsDTO:
    pending: int = 0
    approved: int = 0
    rejected: int = 0

    @property
    def total(self) -> int:
        return self.pending + self.approved + self.rejected


@dataclass(frozen=True)
class PhotoSettingsDTO:
    photo_sharing_enabled: bool
    photo_moderation_required: bool


@dataclass(frozen=True)
class PhotoInputDTO:
    url: str
    uploader_name: str
    caption: str | None = None


def clean_photo_input(
    url: str | None, uploader_name: str | None = None, caption: str | None = None
) -> PhotoInputDTO:
    errors = {}
    url = empty_to_none(url)
    caption = empty_to_none(caption)
    if url is None or not URL_RE.match(url):
        errors["url"] = "A valid photo URL is required"
    if caption is not None and len(caption) > MAX_CAPTION:
        errors["caption"] = f"Caption must be at most {MAX_CAPTION} characters"
    if errors:
        raise ValidationError(field_errors=errors)
    return PhotoInputDTO(
        url=url,
        uploader_name=(empty_to_none(uploader_name) or ANONYMOUS_UPLOADER)[:255],
        caption=caption,
    )
