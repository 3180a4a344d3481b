import abc
from uuid import UUID

from sqlalchemy import select

from src.config.database import async_session_manager
from src.tenants.dtos import WeddingSiteDTO
from src.tenants.repository.orm_models import Tenant, Wedding


def _to_dto(tenant: Tenant, wedding: Wedding) -> WeddingSiteDTO:
    return WeddingSiteDTO(
        tenant_id=tenant.uuid,
        wedding_id=wedding.uuid,
        subdomain=tenant.subdomain,
        partner1_name=wedding.partner1_name,
        partner2_name=wedding.partner2_name,
        wedding_date=wedding.wedding_date,
        rsvp_code_set=wedding.rsvp_code is not None,
        photo_sharing_enabled=wedding.photo_sharing_enabled,
        photo_moderation_required=wedding.photo_moderation_required,
    )


class SiteReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_site_by_subdomain(self, subdomain: str) -> WeddingSiteDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_site_by_tenant(self, tenant_id: UUID) -> WeddingSiteDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_sites(self) -> list[WeddingSiteDTO]:
        raise NotImplementedError


class SqlSiteReadModel(SiteReadModel):
    """SQL implementation of wedding site lookups."""

    async def get_site_by_subdomain(self, subdomain: str) -> WeddingSiteDTO | None:
        async with async_session_manager() as session:
            stmt = (
                select(Tenant, Wedding)
                .join(Wedding, Wedding.tenant_id == Tenant.uuid)
                .where(Tenant.subdomain == subdomain.lower())
            )
            row = (await session.execute(stmt)).one_or_none()
            return _to_dto(*row) if row else None

    async def get_site_by_tenant(self, tenant_id: UUID) -> WeddingSiteDTO | None:
        async with async_session_manager() as session:
            stmt = (
                select(Tenant, Wedding)
                .join(Wedding, Wedding.tenant_id == Tenant.uuid)
                .where(Tenant.uuid == tenant_id)
            )
            row = (await session.execute(stmt)).one_or_none()
            return _to_dto(*row) if row else None

    async def list_sites(self) -> list[WeddingSiteDTO]:
        async with async_session_manager() as session:
            stmt = (
                select(Tenant, Wedding)
                .join(Wedding, Wedding.tenant_id == Tenant.uuid)
                .order_by(Tenant.subdomain)
            )
            rows = (await session.execute(stmt)).all()
            return [_to_dto(tenant, wedding) for tenant, wedding in rows]
