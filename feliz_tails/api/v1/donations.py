"""Donation ledger endpoints: give, list donators, my donations, refund."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException

from feliz_tails.core.dependencies import get_campaign_store, verify_owner_email, verify_token
from feliz_tails.core.repository_protocols import CampaignStore
from feliz_tails.schemas.common import MessageResponse
from feliz_tails.schemas.donation import (
    CampaignResponse,
    DonationCreate,
    DonationEntry,
    MyDonationItem,
    RefundRequest,
)
from feliz_tails.services.donation_ledger import (
    CampaignNotFoundError,
    CampaignPausedError,
    DuplicateTransactionError,
    InvalidAmountError,
    append_donation,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.patch("/donation-campaign/{campaign_id}", response_model=CampaignResponse)
async def donate(
    campaign_id: uuid.UUID,
    body: DonationCreate,
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> CampaignResponse:
    """Record a completed payment against the campaign and bump its total."""
    try:
        campaign = await append_donation(campaigns, campaign_id, body)
    except InvalidAmountError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CampaignNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Campaign not found") from exc
    except CampaignPausedError as exc:
        raise HTTPException(status_code=400, detail="Donations are paused") from exc
    except DuplicateTransactionError as exc:
        raise HTTPException(status_code=409, detail="Transaction already recorded") from exc
    return CampaignResponse.model_validate(campaign)


@router.get("/donators/{campaign_id}", response_model=list[DonationEntry])
async def list_donators(
    campaign_id: uuid.UUID,
    _claims: dict = Depends(verify_token),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> list[DonationEntry]:
    campaign = await campaigns.get(campaign_id)
    if campaign is None:
        raise HTTPException(status_code=404, detail="Campaign not found")
    return [DonationEntry.model_validate(e) for e in campaign.donation_details]


@router.get("/my-donations", response_model=list[MyDonationItem])
async def my_donations(
    email: str = Depends(verify_owner_email),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> list[MyDonationItem]:
    return [
        MyDonationItem(
            campaign_id=campaign.id,
            pet_name=campaign.pet_name,
            pet_image=campaign.pet_image,
            amount=entry.get("amount"),
            transaction_id=entry["transaction_id"],
        )
        for campaign, entry in await campaigns.donations_by(email)
    ]


@router.delete("/my-donations", response_model=MessageResponse)
async def refund_donation(
    body: RefundRequest,
    claims: dict = Depends(verify_token),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> MessageResponse:
    """Pull the caller's own entry by transaction id.

    ``donated_amount`` is left as it was; the running total only ever grows.
    """
    email = claims.get("email", "")
    owned = any(
        campaign.id == body.campaign_id and entry.get("transaction_id") == body.transaction_id
        for campaign, entry in await campaigns.donations_by(email)
    )
    if not owned:
        raise HTTPException(status_code=404, detail="Donation not found")

    await campaigns.remove_donation(body.campaign_id, body.transaction_id, email)
    logger.info(
        "Donation refunded",
        extra={"campaign_id": body.campaign_id, "transaction_id": body.transaction_id},
    )
    return MessageResponse(message="donation removed")
