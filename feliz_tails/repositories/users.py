"""User persistence."""

import uuid

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from feliz_tails.models.user import User


class SqlUserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: uuid.UUID) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.created_at.desc()))
        return list(result.scalars().all())

    async def create(self, data: dict) -> User | None:
        """Insert unless the email is taken; None on conflict."""
        result = await self.db.execute(
            insert(User)
            .values(**data)
            .on_conflict_do_nothing(index_elements=[User.email])
            .returning(User)
        )
        return result.scalar_one_or_none()

    async def set_role(self, user_id: uuid.UUID, role: str) -> User | None:
        user = await self.get(user_id)
        if user is None:
            return None
        user.role = role
        await self.db.flush()
        return user
