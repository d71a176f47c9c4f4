"""Store writes against a real PostgreSQL (skipped when DATABASE_URL is unreachable)."""

import asyncio
import uuid
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

import feliz_tails.models  # noqa: F401  registers every table on Base.metadata
from feliz_tails.core.config import settings
from feliz_tails.db.base import Base
from feliz_tails.models.donation_campaign import DonationCampaign
from feliz_tails.repositories.adoption_requests import SqlAdoptionStore
from feliz_tails.repositories.campaigns import SqlCampaignStore
from feliz_tails.repositories.pets import SqlListingStore
from feliz_tails.repositories.users import SqlUserStore

pytestmark = pytest.mark.postgres


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(settings.DATABASE_URL)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, TimeoutError, SQLAlchemyError) as exc:
        await engine.dispose()
        pytest.skip(f"PostgreSQL not reachable: {exc}")
    yield engine
    await engine.dispose()


@pytest.fixture
def factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def _create_campaign(factory, details: list[dict]) -> uuid.UUID:
    async with factory() as session:
        campaign = await SqlCampaignStore(session).create(
            {
                "pet_name": "Luna",
                "max_donation": 1000,
                "added_by": {"name": "Owner", "email": "owner@example.com"},
                "donation_details": details,
                "donated_amount": 0,
            }
        )
        await session.commit()
        return campaign.id


def _entry(amount, txn: str, email: str = "d@example.com") -> dict:
    return {"donator_email": email, "amount": amount, "transaction_id": txn}


async def test_append_rederives_total(factory):
    campaign_id = await _create_campaign(
        factory, [_entry(50, "t1"), _entry("30", "t2"), _entry("junk", "t3"), _entry(-5, "t4")]
    )
    async with factory() as session:
        campaign = await SqlCampaignStore(session).append_donation(campaign_id, _entry(20, "t5"))
        await session.commit()

    assert campaign.donated_amount == 100
    assert [e["transaction_id"] for e in campaign.donation_details] == [
        "t1",
        "t2",
        "t3",
        "t4",
        "t5",
    ]


async def test_concurrent_appends_do_not_lose_updates(factory):
    campaign_id = await _create_campaign(factory, [])

    async def donate(i: int) -> None:
        async with factory() as session:
            await SqlCampaignStore(session).append_donation(campaign_id, _entry(1, f"c{i}"))
            await session.commit()

    await asyncio.gather(*(donate(i) for i in range(20)))

    async with factory() as session:
        campaign = await session.get(DonationCampaign, campaign_id)
    assert campaign.donated_amount == 20
    assert len(campaign.donation_details) == 20


async def test_remove_keeps_total(factory):
    campaign_id = await _create_campaign(factory, [])
    async with factory() as session:
        store = SqlCampaignStore(session)
        await store.append_donation(campaign_id, _entry(40, "t1"))
        await store.append_donation(campaign_id, _entry(60, "t2"))
        assert await store.remove_donation(campaign_id, "t1", "d@example.com")
        assert not await store.remove_donation(campaign_id, "missing", "d@example.com")
        await session.commit()

    async with factory() as session:
        campaign = await session.get(DonationCampaign, campaign_id)
    assert [e["transaction_id"] for e in campaign.donation_details] == ["t2"]
    assert campaign.donated_amount == 100


async def test_paused_campaign_not_appended(factory):
    campaign_id = await _create_campaign(factory, [])
    async with factory() as session:
        store = SqlCampaignStore(session)
        await store.set_paused(campaign_id, True)
        assert await store.append_donation(campaign_id, _entry(10, "t1")) is None
        await session.commit()


async def test_reused_transaction_id_not_appended(factory):
    campaign_id = await _create_campaign(factory, [])
    async with factory() as session:
        store = SqlCampaignStore(session)
        assert await store.append_donation(campaign_id, _entry(50, "pi_shared")) is not None
        assert (
            await store.append_donation(
                campaign_id, _entry(0, "pi_shared", email="mallory@example.com")
            )
            is None
        )
        await session.commit()

    async with factory() as session:
        campaign = await session.get(DonationCampaign, campaign_id)
    assert [e["donator_email"] for e in campaign.donation_details] == ["d@example.com"]
    assert campaign.donated_amount == 50


async def test_remove_only_touches_callers_entry(factory):
    campaign_id = await _create_campaign(
        factory,
        [
            _entry(50, "pi_shared"),
            _entry(0, "pi_shared", email="mallory@example.com"),
            {"donator_email": "mallory@example.com", "amount": 5},
        ],
    )
    async with factory() as session:
        store = SqlCampaignStore(session)
        assert await store.remove_donation(campaign_id, "pi_shared", "mallory@example.com")
        await session.commit()

    async with factory() as session:
        campaign = await session.get(DonationCampaign, campaign_id)
    assert campaign.donation_details == [
        _entry(50, "pi_shared"),
        {"donator_email": "mallory@example.com", "amount": 5},
    ]


async def test_duplicate_inserts_return_none(factory):
    email = f"adopter-{uuid.uuid4().hex[:8]}@example.com"
    async with factory() as session:
        users = SqlUserStore(session)
        assert await users.create({"name": "Ana", "email": email}) is not None
        assert await users.create({"name": "Ana", "email": email}) is None

        pet = await SqlListingStore(session).create(
            {"name": "Max", "category": "Dog", "added_by": {"email": "owner@example.com"}}
        )
        request = {
            "pet_id": pet.id,
            "owner_email": "owner@example.com",
            "user_email": email,
            "status": "pending",
        }
        adoptions = SqlAdoptionStore(session)
        assert await adoptions.create(request) is not None
        assert await adoptions.create(request) is None
        await session.rollback()
