"""Shared schema types: owner reference, error and duplicate responses."""

from pydantic import BaseModel, Field


class OwnerRef(BaseModel):
    """Embedded ``added_by`` reference on pets and campaigns."""

    name: str | None = Field(None, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)


class AlreadyExistsResponse(BaseModel):
    """Returned with 200 when a create call hits a duplicate guard."""

    message: str
    inserted_id: None = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    type: str
    title: str
    status: int
    detail: str | dict | list
    instance: str
