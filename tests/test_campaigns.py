"""Donation campaign and ledger endpoints."""

import uuid

import pytest
from httpx import AsyncClient

from feliz_tails.models.user import User
from tests.conftest import auth_cookie
from tests.fakes import FakeDatabase

OWNER = {"name": "Owner", "email": "owner@example.com"}
DONOR_EMAIL = "donor@example.com"


def _campaign_body(pet_name: str = "Luna", **extra) -> dict:
    return {
        "pet_name": pet_name,
        "pet_image": f"https://img/{pet_name.lower()}.png",
        "max_donation": 1000,
        "last_date": "2026-12-31",
        "short_description": "Surgery fund",
        "added_by": OWNER,
        **extra,
    }


async def _donate(client: AsyncClient, campaign_id, amount, txn: str | None = None):
    return await client.patch(
        f"/donation-campaign/{campaign_id}",
        json={
            "amount": amount,
            "donator_email": DONOR_EMAIL,
            "donator_name": "Donor",
            "transaction_id": txn or f"pi_{uuid.uuid4().hex[:12]}",
        },
    )


@pytest.fixture
async def campaign(fake_db: FakeDatabase):
    campaign = await fake_db.campaigns.create(_campaign_body())
    fake_db.calls.clear()
    return campaign


async def test_create_campaign(client: AsyncClient):
    response = await client.post(
        "/donation-campaigns", json=_campaign_body("Nala"), headers=auth_cookie(OWNER["email"])
    )
    assert response.status_code == 201
    data = response.json()
    assert data["donated_amount"] == 0
    assert data["is_paused"] is False
    assert data["donation_details"] == []


async def test_donations_accumulate(client: AsyncClient, campaign):
    await _donate(client, campaign.id, 50, "t1")
    await _donate(client, campaign.id, "30", "t2")
    response = await _donate(client, campaign.id, 20, "t3")

    assert response.status_code == 200
    data = response.json()
    assert data["donated_amount"] == 100
    assert len(data["donation_details"]) == 3
    assert data["donation_details"][-1]["transaction_id"] == "t3"


async def test_bad_amount_is_400_and_no_change(client: AsyncClient, fake_db, campaign):
    response = await _donate(client, campaign.id, "a lot")
    assert response.status_code == 400
    assert campaign.donation_details == []
    assert ("campaigns", "append_donation") not in fake_db.calls


async def test_donate_unknown_campaign_404(client: AsyncClient):
    response = await _donate(client, uuid.uuid4(), 10)
    assert response.status_code == 404


async def test_paused_campaign_rejects_donation(client: AsyncClient, campaign):
    paused = await client.patch(
        f"/donation-campaigns/{campaign.id}/pause",
        json={"is_paused": True},
        headers=auth_cookie(OWNER["email"]),
    )
    assert paused.json()["is_paused"] is True

    response = await _donate(client, campaign.id, 10)
    assert response.status_code == 400
    assert campaign.donated_amount == 0


async def test_list_campaigns_newest_first_with_cap(client: AsyncClient, fake_db: FakeDatabase):
    for name in ["A", "B", "C"]:
        await fake_db.campaigns.create(_campaign_body(name))

    response = await client.get("/donation-campaigns", params={"page": 1, "limit": 2})
    assert [c["pet_name"] for c in response.json()] == ["C", "B"]


async def test_recommended_excludes_self_and_paused(client: AsyncClient, fake_db, campaign):
    others = [await fake_db.campaigns.create(_campaign_body(n)) for n in "WXYZ"]
    others[-1].is_paused = True

    response = await client.get(f"/donation-campaigns/{campaign.id}/recommended")
    names = [c["pet_name"] for c in response.json()]
    assert names == ["Y", "X", "W"]


async def test_owner_edits_campaign(client: AsyncClient, campaign, seed_user: User):
    stranger = await client.patch(
        f"/donation-campaigns/{campaign.id}",
        json={"max_donation": 5},
        headers=auth_cookie(seed_user.email),
    )
    assert stranger.status_code == 403

    owner = await client.patch(
        f"/donation-campaigns/{campaign.id}",
        json={"max_donation": 2000},
        headers=auth_cookie(OWNER["email"]),
    )
    assert owner.status_code == 200
    assert owner.json()["max_donation"] == 2000


async def test_delete_campaign_admin_only(
    client: AsyncClient, fake_db, campaign, seed_admin: User, seed_user: User
):
    denied = await client.delete(
        f"/donation-campaigns/{campaign.id}", headers=auth_cookie(seed_user.email)
    )
    assert denied.status_code == 403

    deleted = await client.delete(
        f"/donation-campaigns/{campaign.id}", headers=auth_cookie(seed_admin.email)
    )
    assert deleted.status_code == 204
    assert campaign.id not in fake_db.campaigns.rows


async def test_all_campaigns_admin(client: AsyncClient, campaign, seed_admin: User):
    response = await client.get("/all-campaigns", headers=auth_cookie(seed_admin.email))
    assert response.status_code == 200
    assert len(response.json()) == 1


async def test_my_campaigns(client: AsyncClient, campaign):
    response = await client.get(
        "/my-campaigns", params={"email": OWNER["email"]}, headers=auth_cookie(OWNER["email"])
    )
    assert [c["id"] for c in response.json()] == [str(campaign.id)]


async def test_donators_list(client: AsyncClient, campaign):
    await _donate(client, campaign.id, 15, "t1")
    response = await client.get(
        f"/donators/{campaign.id}", headers=auth_cookie(OWNER["email"])
    )
    assert response.status_code == 200
    assert response.json() == [
        {
            "donator_email": DONOR_EMAIL,
            "donator_name": "Donor",
            "amount": 15,
            "transaction_id": "t1",
        }
    ]


async def test_my_donations_across_campaigns(client: AsyncClient, fake_db, campaign):
    other = await fake_db.campaigns.create(_campaign_body("Milo"))
    await _donate(client, campaign.id, 10, "t1")
    await _donate(client, other.id, 25, "t2")

    response = await client.get(
        "/my-donations", params={"email": DONOR_EMAIL}, headers=auth_cookie(DONOR_EMAIL)
    )
    assert response.status_code == 200
    assert {(d["pet_name"], d["amount"]) for d in response.json()} == {("Luna", 10), ("Milo", 25)}


async def test_refund_removes_entry_but_keeps_total(client: AsyncClient, campaign):
    await _donate(client, campaign.id, 40, "t1")
    await _donate(client, campaign.id, 60, "t2")

    response = await client.request(
        "DELETE",
        "/my-donations",
        json={"campaign_id": str(campaign.id), "transaction_id": "t1"},
        headers=auth_cookie(DONOR_EMAIL),
    )
    assert response.status_code == 200
    assert [e["transaction_id"] for e in campaign.donation_details] == ["t2"]
    # Running total only grows; refunds do not decrement it.
    assert campaign.donated_amount == 100


async def test_refund_of_someone_elses_donation_404(client: AsyncClient, campaign):
    await _donate(client, campaign.id, 40, "t1")
    response = await client.request(
        "DELETE",
        "/my-donations",
        json={"campaign_id": str(campaign.id), "transaction_id": "t1"},
        headers=auth_cookie("someone@example.com"),
    )
    assert response.status_code == 404
    assert len(campaign.donation_details) == 1


async def test_reused_transaction_id_rejected(client: AsyncClient, campaign):
    await _donate(client, campaign.id, 50, "pi_shared")

    reused = await client.patch(
        f"/donation-campaign/{campaign.id}",
        json={"amount": 0, "donator_email": "mallory@example.com", "transaction_id": "pi_shared"},
    )
    assert reused.status_code == 409
    assert [e["donator_email"] for e in campaign.donation_details] == [DONOR_EMAIL]
    assert campaign.donated_amount == 50


async def test_refund_leaves_other_donors_entry_with_same_transaction_id(
    client: AsyncClient, campaign
):
    # Rows written before transaction ids were enforced unique per campaign
    campaign.donation_details = [
        {"donator_email": DONOR_EMAIL, "amount": 50, "transaction_id": "pi_shared"},
        {"donator_email": "mallory@example.com", "amount": 0, "transaction_id": "pi_shared"},
    ]
    campaign.donated_amount = 50

    response = await client.request(
        "DELETE",
        "/my-donations",
        json={"campaign_id": str(campaign.id), "transaction_id": "pi_shared"},
        headers=auth_cookie("mallory@example.com"),
    )
    assert response.status_code == 200
    assert campaign.donation_details == [
        {"donator_email": DONOR_EMAIL, "amount": 50, "transaction_id": "pi_shared"}
    ]


async def test_amount_beyond_limit_is_400(client: AsyncClient, fake_db, campaign):
    response = await _donate(client, campaign.id, "99999999999")
    assert response.status_code == 400
    assert campaign.donation_details == []
    assert ("campaigns", "append_donation") not in fake_db.calls


@pytest.mark.parametrize("field", ["pet_name", "max_donation"])
async def test_campaign_update_rejects_null_required_field(
    client: AsyncClient, fake_db, campaign, field: str
):
    response = await client.patch(
        f"/donation-campaigns/{campaign.id}",
        json={field: None},
        headers=auth_cookie(OWNER["email"]),
    )
    assert response.status_code == 422
    assert ("campaigns", "update") not in fake_db.calls
