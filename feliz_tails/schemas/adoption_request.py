"""Adoption request schemas."""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class AdoptionRequestCreate(BaseModel):
    pet_id: uuid.UUID
    user_name: str | None = Field(None, max_length=255)
    user_email: str = Field(..., min_length=3, max_length=320)
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=2000)


class AdoptionDecision(BaseModel):
    status: Literal["accepted", "rejected"]


class AdoptionRequestResponse(BaseModel):
    id: uuid.UUID
    pet_id: uuid.UUID
    pet_name: str | None = None
    pet_image: str | None = None
    owner_email: str
    user_name: str | None = None
    user_email: str
    phone: str | None = None
    address: str | None = None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}
