"""User schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str | None = Field(None, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    photo_url: str | None = Field(None, max_length=2048)


class UserResponse(BaseModel):
    id: uuid.UUID
    name: str | None = None
    email: str
    photo_url: str | None = None
    role: str
    created_at: datetime

    model_config = {"from_attributes": True}


class AdminStatusResponse(BaseModel):
    admin: bool
