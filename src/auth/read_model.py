import abc

from sqlalchemy import select

from src.auth.dtos import CurrentUserDTO, UserCredentialsDTO
from src.config.database import async_session_manager
from src.models.user import User, UserRole


class UserReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_credentials(self, email: str) -> UserCredentialsDTO | None:
        """Look up a user's identity and password hash by email."""
        raise NotImplementedError


class SqlUserReadModel(UserReadModel):
    async def get_credentials(self, email: str) -> UserCredentialsDTO | None:
        async with async_session_manager() as session:
            result = await session.execute(select(User).where(User.email == email.lower()))
            user = result.scalar_one_or_none()
            if user is None:
                return None
            return UserCredentialsDTO(
                user=CurrentUserDTO(
                    uuid=user.uuid,
                    email=user.email,
                    role=UserRole(user.role),
                    tenant_id=user.tenant_id,
                ),
                hashed_password=user.hashed_password,
                is_active=user.is_active,
            )
