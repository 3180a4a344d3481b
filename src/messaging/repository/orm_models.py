from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.messaging.dtos import MessageStatus
from src.models.base import Base, TimeStamp


class BroadcastMessage(Base, TimeStamp):
    __tablename__ = TableNames.BROADCAST_MESSAGES.value

    wedding_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.WEDDINGS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cta_text: Mapped[str | None] = mapped_column(String(100), nullable=True)
    cta_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # PENDING -> SENT | FAILED | CANCELLED, the last three are final
    status: Mapped[MessageStatus] = mapped_column(
        Enum(
            MessageStatus,
            name="message_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=MessageStatus.PENDING,
        nullable=False,
        index=True,
    )
    scheduled_for: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    sent_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    recipient_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<BroadcastMessage {self.subject} ({self.status})>"
