"""Pet listing persistence."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from feliz_tails.models.pet import Pet
from feliz_tails.services.listing_query import ListingFilter


class SqlListingStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def search(self, listing_filter: ListingFilter, limit: int | None = None) -> list[Pet]:
        stmt = (
            select(Pet)
            .where(*listing_filter.where_clauses())
            .order_by(Pet.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get(self, pet_id: uuid.UUID) -> Pet | None:
        return await self.db.get(Pet, pet_id)

    async def find_by_name_and_owner(self, name: str, owner_email: str) -> Pet | None:
        result = await self.db.execute(
            select(Pet)
            .where(Pet.name == name, Pet.added_by["email"].astext == owner_email)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner_email: str) -> list[Pet]:
        result = await self.db.execute(
            select(Pet)
            .where(Pet.added_by["email"].astext == owner_email)
            .order_by(Pet.created_at.desc())
        )
        return list(result.scalars().all())

    async def create(self, data: dict) -> Pet:
        pet = Pet(**data)
        self.db.add(pet)
        await self.db.flush()
        await self.db.refresh(pet)
        return pet

    async def update(self, pet_id: uuid.UUID, data: dict) -> Pet | None:
        pet = await self.get(pet_id)
        if pet is None:
            return None
        for field, value in data.items():
            setattr(pet, field, value)
        await self.db.flush()
        await self.db.refresh(pet)
        return pet

    async def set_adopted(self, pet_id: uuid.UUID, adopted: bool) -> Pet | None:
        return await self.update(pet_id, {"adopted": adopted})

    async def delete(self, pet_id: uuid.UUID) -> bool:
        result = await self.db.execute(delete(Pet).where(Pet.id == pet_id))
        return result.rowcount > 0
