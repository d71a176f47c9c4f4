import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from feliz_tails.db.base import Base

ADOPTION_STATUSES = ("pending", "accepted", "rejected")


class AdoptionRequest(Base):
    __tablename__ = "adoption_requests"
    __table_args__ = (
        UniqueConstraint("user_email", "pet_id", name="uq_adoption_requests_user_pet"),
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_adoption_requests_status",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, server_default=func.gen_random_uuid())
    pet_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    pet_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pet_image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    owner_email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    user_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="pending")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
