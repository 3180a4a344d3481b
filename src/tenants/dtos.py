import re
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.exceptions import ValidationError

SUBDOMAIN_RE = re.compile(r"^[a-z0-9-]+$")
RSVP_CODE_RE = re.compile(r"^[a-zA-Z0-9]+$")


@dataclass(frozen=True)
class TenantContext:
    """Tenant scope threaded through every read and write model call.

    Replaces an ambient "current tenant" global: whoever builds the context
    (the auth dependency, the public site resolver, the CLI) passes it down
    explicitly and every query filters on ``wedding_id``.
    """

    tenant_id: UUID
    wedding_id: UUID


@dataclass(frozen=True)
class WeddingSiteDTO:
    tenant_id: UUID
    wedding_id: UUID
    subdomain: str
    partner1_name: str
    partner2_name: str
    wedding_date: datetime | None = None
    rsvp_code_set: bool = False
    photo_sharing_enabled: bool = True
    photo_moderation_required: bool = True

    @property
    def couple_names(self) -> str:
        return f"{self.partner1_name} & {self.partner2_name}"

    @property
    def context(self) -> TenantContext:
        return TenantContext(tenant_id=self.tenant_id, wedding_id=self.wedding_id)


def validate_subdomain(subdomain: str) -> str:
    subdomain = (subdomain or "").strip()
    if len(subdomain) < 3:
        raise ValidationError(field_errors={"subdomain": "Subdomain must be at least 3 characters"})
    if len(subdomain) > 63:
        raise ValidationError(field_errors={"subdomain": "Subdomain must be at most 63 characters"})
    if not SUBDOMAIN_RE.match(subdomain):
        raise ValidationError(
            field_errors={"subdomain": "Lowercase letters, numbers, and hyphens only"}
        )
    return subdomain


def validate_rsvp_code(code: str) -> str:
    code = (code or "").strip()
    if len(code) < 4:
        raise ValidationError(field_errors={"code": "RSVP code must be at least 4 characters"})
    if len(code) > 20:
        raise ValidationError(field_errors={"code": "RSVP code must be at most 20 characters"})
    if not RSVP_CODE_RE.match(code):
        raise ValidationError(field_errors={"code": "RSVP code must be alphanumeric"})
    return code
