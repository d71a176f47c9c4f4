"""Donation ledger: amount coercion and the running-total rule.

A campaign's ``donated_amount`` is the sum of its entries' amounts, each
coerced to an integer and floored at 0. The SQL store computes the same thing
in-database (``coerced_amount_sql``) so that re-deriving the prior total and
appending the new entry happen in a single UPDATE.
"""

import logging
import re
import uuid
from collections.abc import Iterable

from sqlalchemy import BigInteger, ColumnElement, case, cast, func

from feliz_tails.core.repository_protocols import CampaignStore
from feliz_tails.models.donation_campaign import DonationCampaign
from feliz_tails.schemas.donation import DonationCreate

logger = logging.getLogger(__name__)

# Leading integer part of a value's text form: "50" -> 50, "20.75" -> 20, " 7usd" -> 7
INTEGER_PREFIX = r"^\s*(-?[0-9]+)"
_INTEGER_PREFIX_RE = re.compile(INTEGER_PREFIX)

# Largest single donation accepted (int4 max); the running total is a bigint
MAX_DONATION_AMOUNT = 2**31 - 1


class LedgerError(Exception):
    pass


class CampaignNotFoundError(LedgerError):
    pass


class CampaignPausedError(LedgerError):
    pass


class InvalidAmountError(LedgerError):
    pass


class DuplicateTransactionError(LedgerError):
    pass


def _as_text(value: object) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_integer_like(value: object) -> bool:
    text = _as_text(value)
    return text is not None and _INTEGER_PREFIX_RE.match(text) is not None


def coerce_amount(value: object) -> int:
    """Integer part of ``value``; non-numeric or missing gives 0; never negative."""
    text = _as_text(value)
    if text is None:
        return 0
    match = _INTEGER_PREFIX_RE.match(text)
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def ledger_total(entries: Iterable[dict]) -> int:
    return sum(coerce_amount(entry.get("amount")) for entry in entries)


def coerced_amount_sql(amount_text: ColumnElement) -> ColumnElement:
    """SQL twin of :func:`coerce_amount` for a text expression (``entry->>'amount'``)."""
    return func.greatest(
        case(
            (
                amount_text.regexp_match(INTEGER_PREFIX),
                cast(func.substring(amount_text, INTEGER_PREFIX), BigInteger),
            ),
            else_=0,
        ),
        0,
    )


def build_entry(body: DonationCreate) -> dict:
    """Validate the incoming amount and shape the embedded entry."""
    if not is_integer_like(body.amount):
        raise InvalidAmountError(f"Invalid donation amount: {body.amount!r}")
    amount = coerce_amount(body.amount)
    if amount > MAX_DONATION_AMOUNT:
        raise InvalidAmountError(f"Donation amount exceeds {MAX_DONATION_AMOUNT}")
    return {
        "donator_email": body.donator_email,
        "donator_name": body.donator_name,
        "amount": amount,
        "transaction_id": body.transaction_id,
    }


async def append_donation(
    store: CampaignStore, campaign_id: uuid.UUID, body: DonationCreate
) -> DonationCampaign:
    """Append one entry and bump the cached total atomically.

    Raises InvalidAmountError before touching the store, CampaignNotFoundError
    for an unknown id, CampaignPausedError if donations are paused and
    DuplicateTransactionError if the campaign already holds ``transaction_id``.
    """
    entry = build_entry(body)

    campaign = await store.append_donation(campaign_id, entry)
    if campaign is None:
        existing = await store.get(campaign_id)
        if existing is None:
            raise CampaignNotFoundError(str(campaign_id))
        if existing.is_paused:
            raise CampaignPausedError(str(campaign_id))
        raise DuplicateTransactionError(entry["transaction_id"])

    logger.info(
        "Donation of %s appended; total now %s",
        entry["amount"],
        campaign.donated_amount,
        extra={"campaign_id": campaign_id, "transaction_id": entry["transaction_id"]},
    )
    return campaign
