"""Adoption request persistence."""

import uuid

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from feliz_tails.models.adoption_request import AdoptionRequest


class SqlAdoptionStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, request_id: uuid.UUID) -> AdoptionRequest | None:
        return await self.db.get(AdoptionRequest, request_id)

    async def find(self, user_email: str, pet_id: uuid.UUID) -> AdoptionRequest | None:
        result = await self.db.execute(
            select(AdoptionRequest).where(
                AdoptionRequest.user_email == user_email,
                AdoptionRequest.pet_id == pet_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_owner(self, owner_email: str) -> list[AdoptionRequest]:
        result = await self.db.execute(
            select(AdoptionRequest)
            .where(AdoptionRequest.owner_email == owner_email)
            .order_by(AdoptionRequest.created_at.desc())
        )
        return list(result.scalars().all())

    async def create(self, data: dict) -> AdoptionRequest | None:
        """Insert unless (user_email, pet_id) already exists; None on conflict."""
        result = await self.db.execute(
            insert(AdoptionRequest)
            .values(**data)
            .on_conflict_do_nothing(constraint="uq_adoption_requests_user_pet")
            .returning(AdoptionRequest)
        )
        return result.scalar_one_or_none()

    async def set_status(self, request_id: uuid.UUID, status: str) -> AdoptionRequest | None:
        request = await self.get(request_id)
        if request is None:
            return None
        request.status = status
        await self.db.flush()
        return request
