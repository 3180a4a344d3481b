from uuid import UUID

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp
from src.photos.dtos import PhotoStatus


class GuestPhoto(Base, TimeStamp):
    __tablename__ = TableNames.GUEST_PHOTOS.value

    wedding_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.WEDDINGS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Uploaded blob, storage is handled outside this service
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    uploader_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    caption: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[PhotoStatus] = mapped_column(
        Enum(PhotoStatus, name="photo_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=PhotoStatus.PENDING,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<GuestPhoto {self.url} ({self.status})>"
