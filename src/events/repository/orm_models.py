from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.events.dtos import RsvpStatus
from src.models.base import Base, TimeStamp


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    wedding_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.WEDDINGS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    location: Mapped[str | None] = mapped_column(String(500), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    dress_code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Private events are only shown to guests invited to them
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    # Ordered list of {"id", "name", "description"}
    meal_options: Mapped[list | None] = mapped_column(JSON, nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Event {self.name} on {self.date_time}>"


class EventGuest(Base, TimeStamp):
    """Invitation of one guest to one event, carrying that guest's RSVP."""

    __tablename__ = TableNames.EVENT_GUESTS.value
    __table_args__ = (UniqueConstraint("event_id", "guest_id", name="uq_event_guest"),)

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.GUESTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Null means the guest has not answered yet
    rsvp_status: Mapped[RsvpStatus | None] = mapped_column(
        Enum(RsvpStatus, name="rsvp_status_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    rsvp_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    plus_one_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    plus_one_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meal_choice: Mapped[str | None] = mapped_column(String(100), nullable=True)
    dietary_notes: Mapped[str | None] = mapped_column(String(500), nullable=True)
    invitation_sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        return f"<EventGuest event={self.event_id} guest={self.guest_id}>"
