from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.auth.dtos import CurrentUserDTO
from src.config.settings import settings
from src.exceptions import Unauthorized
from src.models.user import UserRole

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user: CurrentUserDTO, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {
        "sub": str(user.uuid),
        "email": user.email,
        "role": user.role.value,
        "tenant_id": str(user.tenant_id) if user.tenant_id else None,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> CurrentUserDTO:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        tenant_id = payload.get("tenant_id")
        return CurrentUserDTO(
            uuid=UUID(payload["sub"]),
            email=payload.get("email", ""),
            role=UserRole(payload["role"]),
            tenant_id=UUID(tenant_id) if tenant_id else None,
        )
    except (JWTError, KeyError, ValueError) as e:
        raise Unauthorized("Could not validate credentials") from e
