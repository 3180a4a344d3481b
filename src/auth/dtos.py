from dataclasses import dataclass
from uuid import UUID

from pydantic import BaseModel

from src.models.user import UserRole


@dataclass(frozen=True)
class CurrentUserDTO:
    """Identity carried by an access token."""

    uuid: UUID
    email: str
    role: UserRole
    tenant_id: UUID | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class UserCredentialsDTO:
    user: CurrentUserDTO
    hashed_password: str | None
    is_active: bool


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
