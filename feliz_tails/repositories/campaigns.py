"""Donation campaign persistence (PostgreSQL, JSONB ledger)."""

import uuid

from sqlalchemy import Update, delete, func, literal, or_, select, update
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import column

from feliz_tails.models.donation_campaign import DonationCampaign
from feliz_tails.services.donation_ledger import coerced_amount_sql


def _entries():
    """``jsonb_array_elements(donation_campaigns.donation_details) AS entry(value)``."""
    return (
        func.jsonb_array_elements(DonationCampaign.donation_details)
        .table_valued(column("value", JSONB))
        .render_derived(name="entry")
    )


def build_append_statement(campaign_id: uuid.UUID, entry: dict) -> Update:
    """Single UPDATE that re-derives the prior total, adds the new amount and appends.

    Postgres takes the row lock before evaluating SET, so a concurrent append
    on the same campaign is re-evaluated against the committed row.
    """
    entries = _entries()
    prior_total = (
        select(func.coalesce(func.sum(coerced_amount_sql(entries.c.value["amount"].astext)), 0))
        .select_from(entries)
        .correlate(DonationCampaign.__table__)
        .scalar_subquery()
    )
    new_entry = func.jsonb_build_array(literal(entry, JSONB))

    return (
        update(DonationCampaign)
        .where(
            DonationCampaign.id == campaign_id,
            DonationCampaign.is_paused.is_(False),
            ~DonationCampaign.donation_details.contains(
                [{"transaction_id": entry["transaction_id"]}]
            ),
        )
        .values(
            donated_amount=prior_total + entry["amount"],
            donation_details=DonationCampaign.donation_details.op("||")(new_entry),
        )
        .returning(DonationCampaign)
        .execution_options(synchronize_session=False, populate_existing=True)
    )


def build_remove_statement(
    campaign_id: uuid.UUID, transaction_id: str, donator_email: str
) -> Update:
    """Drop the donator's entry carrying ``transaction_id``; ``donated_amount`` is untouched."""
    entries = _entries()
    remaining = (
        select(func.coalesce(func.jsonb_agg(entries.c.value), literal([], JSONB)))
        .select_from(entries)
        .where(
            or_(
                entries.c.value["transaction_id"].astext.is_distinct_from(transaction_id),
                entries.c.value["donator_email"].astext.is_distinct_from(donator_email),
            )
        )
        .correlate(DonationCampaign.__table__)
        .scalar_subquery()
    )
    return (
        update(DonationCampaign)
        .where(
            DonationCampaign.id == campaign_id,
            DonationCampaign.donation_details.contains(
                [{"transaction_id": transaction_id, "donator_email": donator_email}]
            ),
        )
        .values(donation_details=remaining)
        .execution_options(synchronize_session=False)
    )


class SqlCampaignStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, campaign_id: uuid.UUID) -> DonationCampaign | None:
        return await self.db.get(DonationCampaign, campaign_id)

    async def list_recent(self, limit: int | None = None) -> list[DonationCampaign]:
        stmt = select(DonationCampaign).order_by(DonationCampaign.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_by_owner(self, owner_email: str) -> list[DonationCampaign]:
        result = await self.db.execute(
            select(DonationCampaign)
            .where(DonationCampaign.added_by["email"].astext == owner_email)
            .order_by(DonationCampaign.created_at.desc())
        )
        return list(result.scalars().all())

    async def recommended(self, exclude_id: uuid.UUID, limit: int) -> list[DonationCampaign]:
        result = await self.db.execute(
            select(DonationCampaign)
            .where(DonationCampaign.id != exclude_id, DonationCampaign.is_paused.is_(False))
            .order_by(DonationCampaign.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def create(self, data: dict) -> DonationCampaign:
        campaign = DonationCampaign(**data)
        self.db.add(campaign)
        await self.db.flush()
        await self.db.refresh(campaign)
        return campaign

    async def update(self, campaign_id: uuid.UUID, data: dict) -> DonationCampaign | None:
        campaign = await self.get(campaign_id)
        if campaign is None:
            return None
        for field, value in data.items():
            setattr(campaign, field, value)
        await self.db.flush()
        await self.db.refresh(campaign)
        return campaign

    async def set_paused(self, campaign_id: uuid.UUID, paused: bool) -> DonationCampaign | None:
        return await self.update(campaign_id, {"is_paused": paused})

    async def delete(self, campaign_id: uuid.UUID) -> bool:
        result = await self.db.execute(
            delete(DonationCampaign).where(DonationCampaign.id == campaign_id)
        )
        return result.rowcount > 0

    async def append_donation(
        self, campaign_id: uuid.UUID, entry: dict
    ) -> DonationCampaign | None:
        result = await self.db.execute(build_append_statement(campaign_id, entry))
        return result.scalar_one_or_none()

    async def donations_by(self, donator_email: str) -> list[tuple[DonationCampaign, dict]]:
        result = await self.db.execute(
            select(DonationCampaign)
            .where(
                DonationCampaign.donation_details.contains([{"donator_email": donator_email}])
            )
            .order_by(DonationCampaign.created_at.desc())
        )
        return [
            (campaign, entry)
            for campaign in result.scalars().all()
            for entry in campaign.donation_details
            if entry.get("donator_email") == donator_email
        ]

    async def remove_donation(
        self, campaign_id: uuid.UUID, transaction_id: str, donator_email: str
    ) -> bool:
        result = await self.db.execute(
            build_remove_statement(campaign_id, transaction_id, donator_email)
        )
        return result.rowcount > 0
