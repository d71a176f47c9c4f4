"""Adoption requests: submit, owner inbox, accept/reject."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from feliz_tails.core.dependencies import (
    get_adoption_store,
    get_listing_store,
    verify_owner_email,
    verify_token,
)
from feliz_tails.core.exceptions import forbidden
from feliz_tails.core.repository_protocols import AdoptionStore, ListingStore
from feliz_tails.schemas.adoption_request import (
    AdoptionDecision,
    AdoptionRequestCreate,
    AdoptionRequestResponse,
)
from feliz_tails.schemas.common import AlreadyExistsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _already_exists() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content=AlreadyExistsResponse(message="adoption request already exists").model_dump(),
    )


@router.post("", response_model=AdoptionRequestResponse, status_code=201)
async def create_adoption_request(
    body: AdoptionRequestCreate,
    claims: dict = Depends(verify_token),
    requests: AdoptionStore = Depends(get_adoption_store),
    pets: ListingStore = Depends(get_listing_store),
):
    """One request per (user_email, pet_id); repeats get the already-exists body.

    Requests are filed under the caller's own session email only.
    """
    if body.user_email != claims.get("email"):
        raise forbidden()

    existing = await requests.find(body.user_email, body.pet_id)
    if existing is not None:
        return _already_exists()

    pet = await pets.get(body.pet_id)
    if pet is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    if pet.adopted:
        raise HTTPException(status_code=409, detail="Pet is already adopted")

    request = await requests.create(
        {
            **body.model_dump(),
            "pet_name": pet.name,
            "pet_image": pet.image,
            "owner_email": pet.added_by["email"],
            "status": "pending",
        }
    )
    if request is None:
        # An identical request was inserted concurrently
        return _already_exists()
    return AdoptionRequestResponse.model_validate(request)


@router.get("", response_model=list[AdoptionRequestResponse])
async def list_adoption_requests(
    email: str = Depends(verify_owner_email),
    requests: AdoptionStore = Depends(get_adoption_store),
) -> list[AdoptionRequestResponse]:
    """Requests received for pets the caller listed."""
    return [
        AdoptionRequestResponse.model_validate(r) for r in await requests.list_for_owner(email)
    ]


@router.patch("/{request_id}", response_model=AdoptionRequestResponse)
async def decide_adoption_request(
    request_id: uuid.UUID,
    body: AdoptionDecision,
    claims: dict = Depends(verify_token),
    requests: AdoptionStore = Depends(get_adoption_store),
    pets: ListingStore = Depends(get_listing_store),
) -> AdoptionRequestResponse:
    """Only the pet's owner decides. Accepting marks the pet adopted."""
    request = await requests.get(request_id)
    if request is None:
        raise HTTPException(status_code=404, detail="Adoption request not found")
    if request.owner_email != claims.get("email"):
        raise forbidden()

    updated = await requests.set_status(request_id, body.status)
    if updated is None:
        raise HTTPException(status_code=404, detail="Adoption request not found")

    if body.status == "accepted":
        await pets.set_adopted(request.pet_id, True)
        logger.info("Adoption request %s accepted; pet %s adopted", request_id, request.pet_id)

    return AdoptionRequestResponse.model_validate(updated)
