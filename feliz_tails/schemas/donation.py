"""Donation campaign and ledger entry schemas."""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from feliz_tails.schemas.common import OwnerRef


class DonationEntry(BaseModel):
    """One embedded ledger entry.

    ``amount`` is read back as stored; older rows may hold non-integer values,
    which the running total treats as 0.
    """

    donator_email: str
    donator_name: str | None = None
    amount: int | float | str | None = None
    transaction_id: str

    model_config = {"extra": "allow"}


class DonationCreate(BaseModel):
    """Body of ``PATCH /donation-campaign/{id}``.

    ``amount`` stays loosely typed so malformed input reaches the ledger's
    own bad-input check instead of a generic 422.
    """

    amount: int | float | str
    donator_email: str = Field(..., min_length=3, max_length=320)
    donator_name: str | None = Field(None, max_length=255)
    transaction_id: str = Field(..., min_length=1, max_length=255)


class CampaignCreate(BaseModel):
    pet_name: str = Field(..., min_length=1, max_length=255)
    pet_image: str | None = Field(None, max_length=2048)
    max_donation: int = Field(..., gt=0)
    last_date: date | None = None
    short_description: str | None = None
    long_description: str | None = None
    added_by: OwnerRef


class CampaignUpdate(BaseModel):
    pet_name: str | None = Field(None, min_length=1, max_length=255)
    pet_image: str | None = Field(None, max_length=2048)
    max_donation: int | None = Field(None, gt=0)
    last_date: date | None = None
    short_description: str | None = None
    long_description: str | None = None

    @field_validator("pet_name", "max_donation")
    @classmethod
    def reject_null(cls, v: str | int | None) -> str | int:
        if v is None:
            raise ValueError("Field may be omitted but not set to null")
        return v


class PauseUpdate(BaseModel):
    is_paused: bool


class CampaignResponse(BaseModel):
    id: uuid.UUID
    pet_name: str
    pet_image: str | None = None
    max_donation: int
    donated_amount: int
    is_paused: bool
    last_date: date | None = None
    short_description: str | None = None
    long_description: str | None = None
    added_by: OwnerRef
    donation_details: list[DonationEntry] = []
    created_at: datetime

    model_config = {"from_attributes": True}


class MyDonationItem(BaseModel):
    campaign_id: uuid.UUID
    pet_name: str
    pet_image: str | None = None
    amount: int | float | str | None = None
    transaction_id: str


class RefundRequest(BaseModel):
    campaign_id: uuid.UUID
    transaction_id: str = Field(..., min_length=1, max_length=255)
