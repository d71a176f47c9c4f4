"""POST /create-payment-intent (Stripe mocked)."""

from types import SimpleNamespace

import pytest
import stripe
from httpx import AsyncClient

from feliz_tails.core.config import settings
from feliz_tails.services.payments import to_minor_units


@pytest.fixture
def captured_intents(monkeypatch) -> list[dict]:
    calls: list[dict] = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(id="pi_123", client_secret="pi_123_secret_abc")

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)
    return calls


@pytest.mark.parametrize(("price", "cents"), [(10, 1000), (19.99, 1999), (0.5, 50), (4.567, 456)])
def test_to_minor_units(price, cents):
    assert to_minor_units(price) == cents


async def test_creates_card_intent(client: AsyncClient, captured_intents: list[dict]):
    response = await client.post("/create-payment-intent", json={"price": 25.5})
    assert response.status_code == 200
    assert response.json() == {"client_secret": "pi_123_secret_abc"}

    (call,) = captured_intents
    assert call["amount"] == 2550
    assert call["currency"] == "usd"
    assert call["payment_method_types"] == ["card"]
    assert call["api_key"] == settings.STRIPE_SECRET_KEY


async def test_rejects_non_positive_price(client: AsyncClient, captured_intents: list[dict]):
    response = await client.post("/create-payment-intent", json={"price": 0})
    assert response.status_code == 422
    assert captured_intents == []


async def test_rejects_infinite_price(client: AsyncClient, captured_intents: list[dict]):
    response = await client.post(
        "/create-payment-intent",
        content='{"price": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert captured_intents == []


async def test_stripe_error_maps_to_502(client: AsyncClient, monkeypatch):
    def failing_create(**kwargs):
        raise stripe.InvalidRequestError("Amount must be at least $0.50 usd", param="amount")

    monkeypatch.setattr(stripe.PaymentIntent, "create", failing_create)

    response = await client.post("/create-payment-intent", json={"price": 0.1})
    assert response.status_code == 502
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["title"] == "Payment provider error"


async def test_unconfigured_stripe_is_503(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "STRIPE_SECRET_KEY", "")
    response = await client.post("/create-payment-intent", json={"price": 5})
    assert response.status_code == 503
