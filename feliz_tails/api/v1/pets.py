"""Pet listings: public browse, owner CRUD, admin overview."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from feliz_tails.core.dependencies import (
    ensure_owner_or_admin,
    get_listing_store,
    get_user_store,
    verify_admin,
    verify_owner_email,
    verify_token,
)
from feliz_tails.core.repository_protocols import ListingStore, UserStore
from feliz_tails.models.pet import Pet
from feliz_tails.models.user import User
from feliz_tails.schemas.common import AlreadyExistsResponse
from feliz_tails.schemas.pet import AdoptedUpdate, PetCreate, PetResponse, PetUpdate
from feliz_tails.services.listing_query import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ListingFilter,
    result_cap,
)

router = APIRouter()


async def _get_pet_or_404(pets: ListingStore, pet_id: uuid.UUID) -> Pet:
    pet = await pets.get(pet_id)
    if pet is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


@router.get("/pet-listing", response_model=list[PetResponse])
async def list_pets(
    category: str | None = Query(None),
    name: str | None = Query(None),
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    pets: ListingStore = Depends(get_listing_store),
) -> list[PetResponse]:
    """Newest first, adopted pets hidden. Returns pages 1..``page`` together."""
    listing_filter = ListingFilter(category=category, name=name)
    rows = await pets.search(listing_filter, limit=result_cap(page, limit))
    return [PetResponse.model_validate(p) for p in rows]


@router.get("/pet-listing/{pet_id}", response_model=PetResponse)
async def get_pet(
    pet_id: uuid.UUID,
    pets: ListingStore = Depends(get_listing_store),
) -> PetResponse:
    return PetResponse.model_validate(await _get_pet_or_404(pets, pet_id))


@router.post("/add-a-pet", response_model=PetResponse, status_code=201)
async def add_pet(
    body: PetCreate,
    pets: ListingStore = Depends(get_listing_store),
):
    existing = await pets.find_by_name_and_owner(body.name, body.added_by.email)
    if existing is not None:
        return JSONResponse(
            status_code=200,
            content=AlreadyExistsResponse(message="pet already exists").model_dump(),
        )

    pet = await pets.create(body.model_dump())
    return PetResponse.model_validate(pet)


@router.get("/my-added-pets", response_model=list[PetResponse])
async def my_added_pets(
    email: str = Depends(verify_owner_email),
    pets: ListingStore = Depends(get_listing_store),
) -> list[PetResponse]:
    return [PetResponse.model_validate(p) for p in await pets.list_by_owner(email)]


@router.patch("/pets/{pet_id}", response_model=PetResponse)
async def update_pet(
    pet_id: uuid.UUID,
    body: PetUpdate,
    claims: dict = Depends(verify_token),
    pets: ListingStore = Depends(get_listing_store),
    users: UserStore = Depends(get_user_store),
) -> PetResponse:
    pet = await _get_pet_or_404(pets, pet_id)
    await ensure_owner_or_admin(pet.added_by, claims, users)

    updated = await pets.update(pet_id, body.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    return PetResponse.model_validate(updated)


@router.patch("/pets/{pet_id}/adopt", response_model=PetResponse)
async def set_adopted(
    pet_id: uuid.UUID,
    body: AdoptedUpdate,
    claims: dict = Depends(verify_token),
    pets: ListingStore = Depends(get_listing_store),
    users: UserStore = Depends(get_user_store),
) -> PetResponse:
    pet = await _get_pet_or_404(pets, pet_id)
    await ensure_owner_or_admin(pet.added_by, claims, users)

    updated = await pets.set_adopted(pet_id, body.adopted)
    if updated is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    return PetResponse.model_validate(updated)


@router.delete("/pets/{pet_id}", status_code=204)
async def delete_pet(
    pet_id: uuid.UUID,
    claims: dict = Depends(verify_token),
    pets: ListingStore = Depends(get_listing_store),
    users: UserStore = Depends(get_user_store),
) -> None:
    pet = await _get_pet_or_404(pets, pet_id)
    await ensure_owner_or_admin(pet.added_by, claims, users)
    await pets.delete(pet_id)


@router.get("/all-pets", response_model=list[PetResponse])
async def all_pets(
    _admin: User = Depends(verify_admin),
    pets: ListingStore = Depends(get_listing_store),
) -> list[PetResponse]:
    """Admin view: adopted pets included."""
    rows = await pets.search(ListingFilter(exclude_adopted=False))
    return [PetResponse.model_validate(p) for p in rows]
