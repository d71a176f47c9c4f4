import uuid
from datetime import date, datetime

from sqlalchemy import BigInteger, Boolean, Date, DateTime, Integer, String, Text, func, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from feliz_tails.db.base import Base


class DonationCampaign(Base):
    """Fundraising record for one pet.

    ``donation_details`` is the embedded, insertion-ordered list of
    ``{donator_email, donator_name, amount, transaction_id}`` entries.
    ``donated_amount`` caches their sum and is only ever bumped on append.
    """

    __tablename__ = "donation_campaigns"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, server_default=func.gen_random_uuid())
    pet_name: Mapped[str] = mapped_column(String(255), nullable=False)
    pet_image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    max_donation: Mapped[int] = mapped_column(Integer, nullable=False)
    donated_amount: Mapped[int] = mapped_column(BigInteger, nullable=False, server_default="0")
    is_paused: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="false")
    last_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    long_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # {"name": ..., "email": ...}
    added_by: Mapped[dict] = mapped_column(JSONB, nullable=False)
    donation_details: Mapped[list] = mapped_column(
        JSONB, nullable=False, server_default=text("'[]'::jsonb")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
