"""Payment intent schemas."""

from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    price: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Amount in major currency units"
    )


class PaymentIntentResponse(BaseModel):
    client_secret: str
