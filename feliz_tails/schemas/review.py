"""Review schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    photo_url: str | None = Field(None, max_length=2048)
    rating: int = Field(..., ge=1, le=5)
    message: str = Field(..., min_length=1, max_length=5000)


class ReviewResponse(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    photo_url: str | None = None
    rating: int
    message: str
    created_at: datetime

    model_config = {"from_attributes": True}
