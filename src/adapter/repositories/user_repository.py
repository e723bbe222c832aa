from typing import Optional
from uuid import UUID

from sqlmodel import func, select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(SqlModelRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return await self._first(stmt, "users.get_by_id", user_id=str(user_id))

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = (
            select(User)
            .where(func.lower(User.email) == email.strip().lower())
            .order_by(User.updated_at.desc())
        )
        return await self._first(stmt, "users.get_by_email")

    async def create(self, user: User) -> User:
        return await self._save(user, "users.create", user_id=str(user.id))

    async def update(self, user: User) -> User:
        return await self._save(user, "users.update", touch=True, user_id=str(user.id))
