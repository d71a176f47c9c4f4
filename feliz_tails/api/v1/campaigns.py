"""Donation campaigns: create, browse, edit, pause, admin removal."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query

from feliz_tails.core.dependencies import (
    ensure_owner_or_admin,
    get_campaign_store,
    get_user_store,
    verify_admin,
    verify_owner_email,
    verify_token,
)
from feliz_tails.core.repository_protocols import CampaignStore, UserStore
from feliz_tails.models.donation_campaign import DonationCampaign
from feliz_tails.models.user import User
from feliz_tails.schemas.donation import (
    CampaignCreate,
    CampaignResponse,
    CampaignUpdate,
    PauseUpdate,
)
from feliz_tails.services.listing_query import DEFAULT_LIMIT, DEFAULT_PAGE, result_cap

router = APIRouter()

RECOMMENDED_COUNT = 3


async def _get_campaign_or_404(
    campaigns: CampaignStore, campaign_id: uuid.UUID
) -> DonationCampaign:
    campaign = await campaigns.get(campaign_id)
    if campaign is None:
        raise HTTPException(status_code=404, detail="Campaign not found")
    return campaign


@router.post("/donation-campaigns", response_model=CampaignResponse, status_code=201)
async def create_campaign(
    body: CampaignCreate,
    _claims: dict = Depends(verify_token),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> CampaignResponse:
    campaign = await campaigns.create(
        {**body.model_dump(), "donated_amount": 0, "is_paused": False, "donation_details": []}
    )
    return CampaignResponse.model_validate(campaign)


@router.get("/donation-campaigns", response_model=list[CampaignResponse])
async def list_campaigns(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> list[CampaignResponse]:
    rows = await campaigns.list_recent(limit=result_cap(page, limit))
    return [CampaignResponse.model_validate(c) for c in rows]


@router.get("/donation-campaigns/{campaign_id}", response_model=CampaignResponse)
async def get_campaign(
    campaign_id: uuid.UUID,
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> CampaignResponse:
    return CampaignResponse.model_validate(await _get_campaign_or_404(campaigns, campaign_id))


@router.get("/donation-campaigns/{campaign_id}/recommended", response_model=list[CampaignResponse])
async def recommended_campaigns(
    campaign_id: uuid.UUID,
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> list[CampaignResponse]:
    rows = await campaigns.recommended(campaign_id, RECOMMENDED_COUNT)
    return [CampaignResponse.model_validate(c) for c in rows]


@router.patch("/donation-campaigns/{campaign_id}", response_model=CampaignResponse)
async def update_campaign(
    campaign_id: uuid.UUID,
    body: CampaignUpdate,
    claims: dict = Depends(verify_token),
    campaigns: CampaignStore = Depends(get_campaign_store),
    users: UserStore = Depends(get_user_store),
) -> CampaignResponse:
    campaign = await _get_campaign_or_404(campaigns, campaign_id)
    await ensure_owner_or_admin(campaign.added_by, claims, users)

    updated = await campaigns.update(campaign_id, body.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(status_code=404, detail="Campaign not found")
    return CampaignResponse.model_validate(updated)


@router.patch("/donation-campaigns/{campaign_id}/pause", response_model=CampaignResponse)
async def pause_campaign(
    campaign_id: uuid.UUID,
    body: PauseUpdate,
    claims: dict = Depends(verify_token),
    campaigns: CampaignStore = Depends(get_campaign_store),
    users: UserStore = Depends(get_user_store),
) -> CampaignResponse:
    campaign = await _get_campaign_or_404(campaigns, campaign_id)
    await ensure_owner_or_admin(campaign.added_by, claims, users)

    updated = await campaigns.set_paused(campaign_id, body.is_paused)
    if updated is None:
        raise HTTPException(status_code=404, detail="Campaign not found")
    return CampaignResponse.model_validate(updated)


@router.delete("/donation-campaigns/{campaign_id}", status_code=204)
async def delete_campaign(
    campaign_id: uuid.UUID,
    _admin: User = Depends(verify_admin),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> None:
    if not await campaigns.delete(campaign_id):
        raise HTTPException(status_code=404, detail="Campaign not found")


@router.get("/all-campaigns", response_model=list[CampaignResponse])
async def all_campaigns(
    _admin: User = Depends(verify_admin),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> list[CampaignResponse]:
    return [CampaignResponse.model_validate(c) for c in await campaigns.list_recent()]


@router.get("/my-campaigns", response_model=list[CampaignResponse])
async def my_campaigns(
    email: str = Depends(verify_owner_email),
    campaigns: CampaignStore = Depends(get_campaign_store),
) -> list[CampaignResponse]:
    return [CampaignResponse.model_validate(c) for c in await campaigns.list_by_owner(email)]
