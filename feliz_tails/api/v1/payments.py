"""Payment intent endpoint (Stripe)."""

from fastapi import APIRouter

from feliz_tails.schemas.payment import PaymentIntentRequest, PaymentIntentResponse
from feliz_tails.services.payments import create_payment_intent

router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def payment_intent(body: PaymentIntentRequest) -> PaymentIntentResponse:
    client_secret = await create_payment_intent(body.price)
    return PaymentIntentResponse(client_secret=client_secret)
