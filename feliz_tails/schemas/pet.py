"""Pet listing request/response schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from feliz_tails.schemas.common import OwnerRef


class PetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    age: int | None = Field(None, ge=0, le=100)
    category: str = Field(..., min_length=1, max_length=64)
    location: str | None = Field(None, max_length=255)
    image: str | None = Field(None, max_length=2048)
    short_description: str | None = None
    long_description: str | None = None
    added_by: OwnerRef


class PetUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    age: int | None = Field(None, ge=0, le=100)
    category: str | None = Field(None, min_length=1, max_length=64)
    location: str | None = Field(None, max_length=255)
    image: str | None = Field(None, max_length=2048)
    short_description: str | None = None
    long_description: str | None = None

    @field_validator("name", "category")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Field may be omitted but not set to null")
        return v


class AdoptedUpdate(BaseModel):
    adopted: bool = True


class PetResponse(BaseModel):
    id: uuid.UUID
    name: str
    age: int | None = None
    category: str
    location: str | None = None
    image: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    adopted: bool
    added_by: OwnerRef
    created_at: datetime

    model_config = {"from_attributes": True}
