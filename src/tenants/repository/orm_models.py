from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp


class Tenant(Base, TimeStamp):
    __tablename__ = TableNames.TENANTS.value

    subdomain: Mapped[str] = mapped_column(String(63), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Tenant {self.subdomain}>"


class Wedding(Base, TimeStamp):
    __tablename__ = TableNames.WEDDINGS.value

    # One wedding per tenant
    tenant_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.TENANTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    partner1_name: Mapped[str] = mapped_column(String(255), nullable=False)
    partner2_name: Mapped[str] = mapped_column(String(255), nullable=False)
    wedding_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Shared code guests type in before they can look themselves up
    rsvp_code: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)

    photo_sharing_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    photo_moderation_required: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    payment_settings: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    @property
    def couple_names(self) -> str:
        return f"{self.partner1_name} & {self.partner2_name}"

    def __repr__(self) -> str:
        return f"<Wedding {self.couple_names}>"
