"""Session token request schema."""

from pydantic import BaseModel, Field


class TokenRequest(BaseModel):
    """Claims the front-end sends after its identity provider signs the user in."""

    email: str = Field(..., min_length=3, max_length=320)
    name: str | None = Field(None, max_length=255)

    model_config = {"extra": "allow"}
