from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp


class Guest(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value

    wedding_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.WEDDINGS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    party_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    party_size: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    allow_plus_one: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Seating: null means unassigned
    table_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.SEATING_TABLES.value}.uuid", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Guest {self.name}>"
