"""Site reviews."""

from fastapi import APIRouter, Depends

from feliz_tails.core.dependencies import get_review_store, verify_token
from feliz_tails.core.repository_protocols import ReviewStore
from feliz_tails.schemas.review import ReviewCreate, ReviewResponse

router = APIRouter()


@router.get("", response_model=list[ReviewResponse])
async def list_reviews(reviews: ReviewStore = Depends(get_review_store)) -> list[ReviewResponse]:
    return [ReviewResponse.model_validate(r) for r in await reviews.list_all()]


@router.post("", response_model=ReviewResponse, status_code=201)
async def create_review(
    body: ReviewCreate,
    _claims: dict = Depends(verify_token),
    reviews: ReviewStore = Depends(get_review_store),
) -> ReviewResponse:
    review = await reviews.create(body.model_dump())
    return ReviewResponse.model_validate(review)
