import re
from dataclasses import dataclass
from uuid import UUID

from src.exceptions import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class GuestDTO:
    """DTO for guest data."""

    id: UUID
    name: str
    party_name: str | None = None
    email: str | None = None
    phone: str | None = None
    party_size: int = 1
    allow_plus_one: bool = False
    table_id: UUID | None = None

    @classmethod
    def from_guest(cls, guest) -> "GuestDTO":
        return cls(
            id=guest.uuid,
            name=guest.name,
            party_name=guest.party_name,
            email=guest.email,
            phone=guest.phone,
            party_size=guest.party_size,
            allow_plus_one=guest.allow_plus_one,
            table_id=guest.table_id,
        )


@dataclass(frozen=True)
class GuestInputDTO:
    """Validated guest fields, empty strings already normalized to None."""

    name: str
    party_name: str | None = None
    email: str | None = None
    phone: str | None = None
    party_size: int = 1
    allow_plus_one: bool = False


def empty_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def clean_guest_input(
    name: str | None,
    party_name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    party_size: int | None = 1,
    allow_plus_one: bool = False,
) -> GuestInputDTO:
    errors = {}
    name = empty_to_none(name)
    email = empty_to_none(email)
    if name is None:
        errors["name"] = "Name is required"
    if email is not None and not is_valid_email(email):
        errors["email"] = "Invalid email format"
    if party_size is None:
        party_size = 1
    if party_size < 1:
        errors["party_size"] = "Party size must be at least 1"
    if errors:
        raise ValidationError(field_errors=errors)
    return GuestInputDTO(
        name=name,
        party_name=empty_to_none(party_name),
        email=email.lower() if email else None,
        phone=empty_to_none(phone),
        party_size=party_size,
        allow_plus_one=allow_plus_one,
    )
