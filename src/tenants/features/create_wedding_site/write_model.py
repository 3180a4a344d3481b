"""Write model for creating wedding sites.

Creates the Tenant, its Wedding and the couple's User in one transaction.
Only platform admins reach this through the API.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.security import get_password_hash
from src.config.database import async_session_manager
from src.exceptions import Conflict, ValidationError
from src.models.user import User, UserRole
from src.tenants.dtos import WeddingSiteDTO, validate_subdomain
from src.tenants.repository.orm_models import Tenant, Wedding

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class WeddingSiteWriteModel(ABC):
    @abstractmethod
    async def create_wedding_site(
        self,
        subdomain: str,
        partner1_name: str,
        partner2_name: str,
        couple_email: str,
        couple_password: str,
    ) -> WeddingSiteDTO:
        """Create a tenant, its wedding and the couple login.

        Raises:
            ValidationError: a field is missing or malformed
            Conflict: the subdomain or the couple email is already taken
        """
        raise NotImplementedError


class SqlWeddingSiteWriteModel(WeddingSiteWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_wedding_site(
        self,
        subdomain: str,
        partner1_name: str,
        partner2_name: str,
        couple_email: str,
        couple_password: str,
    ) -> WeddingSiteDTO:
        subdomain = validate_subdomain(subdomain.lower())
        errors = {}
        if not partner1_name or not partner1_name.strip():
            errors["partner1_name"] = "Partner 1 name is required"
        if not partner2_name or not partner2_name.strip():
            errors["partner2_name"] = "Partner 2 name is required"
        if len(couple_password or "") < MIN_PASSWORD_LENGTH:
            errors["couple_password"] = "Password must be at least 8 characters"
        if errors:
            raise ValidationError(field_errors=errors)

        couple_email = couple_email.strip().lower()

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            existing = await session.execute(select(Tenant).where(Tenant.subdomain == subdomain))
            if existing.scalar_one_or_none() is not None:
                raise Conflict("This subdomain is already taken")

            existing_user = await session.execute(select(User).where(User.email == couple_email))
            if existing_user.scalar_one_or_none() is not None:
                raise Conflict("A user with this email already exists")

            tenant = Tenant(
                subdomain=subdomain,
                name=f"{partner1_name.strip()} & {partner2_name.strip()}",
            )
            session.add(tenant)
            await session.flush()

            wedding = Wedding(
                tenant_id=tenant.uuid,
                partner1_name=partner1_name.strip(),
                partner2_name=partner2_name.strip(),
                photo_sharing_enabled=True,
                photo_moderation_required=True,
            )
            session.add(wedding)
            session.add(
                User(
                    email=couple_email,
                    hashed_password=get_password_hash(couple_password),
                    role=UserRole.COUPLE,
                    tenant_id=tenant.uuid,
                    is_active=True,
                )
            )
            try:
                await session.flush()
            except IntegrityError as e:
                # lost a race against a concurrent signup with the same subdomain
                raise Conflict("This subdomain is already taken") from e

            logger.info("Created wedding site %s", subdomain)
            return WeddingSiteDTO(
                tenant_id=tenant.uuid,
                wedding_id=wedding.uuid,
                subdomain=subdomain,
                partner1_name=wedding.partner1_name,
                partner2_name=wedding.partner2_name,
            )
