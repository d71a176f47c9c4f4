"""Stripe PaymentIntent creation."""

import logging

import stripe
from starlette.concurrency import run_in_threadpool

from feliz_tails.core.config import settings
from feliz_tails.core.exceptions import ProblemDetailError

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    """Dollars to cents, truncating sub-cent fractions."""
    return int(round(price * 100, 6))


async def create_payment_intent(price: float) -> str:
    """Create a card PaymentIntent for ``price`` and return its client secret."""
    if not settings.STRIPE_SECRET_KEY:
        raise ProblemDetailError(
            status=503,
            title="Payments unavailable",
            detail="Stripe is not configured",
        )

    amount = to_minor_units(price)
    try:
        intent = await run_in_threadpool(
            stripe.PaymentIntent.create,
            amount=amount,
            currency=settings.STRIPE_CURRENCY,
            payment_method_types=["card"],
            api_key=settings.STRIPE_SECRET_KEY,
        )
    except stripe.StripeError as exc:
        logger.error("Failed to create Stripe payment intent: %s", exc)
        raise ProblemDetailError(
            status=502,
            title="Payment provider error",
            detail="Could not create payment intent",
        ) from exc

    return intent.client_secret
