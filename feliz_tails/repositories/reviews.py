"""Review persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from feliz_tails.models.review import Review


class SqlReviewStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Review]:
        result = await self.db.execute(select(Review).order_by(Review.created_at.desc()))
        return list(result.scalars().all())

    async def create(self, data: dict) -> Review:
        review = Review(**data)
        self.db.add(review)
        await self.db.flush()
        await self.db.refresh(review)
        return review
