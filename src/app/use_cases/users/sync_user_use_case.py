"""
Sync User Use Case

Keeps the local identity mirror in step with the verified token claims.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.store_boundary import store_boundary
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class SyncUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_boundary("sync_user")
    async def execute(
        self, user_id: UUID, email: str, full_name: Optional[str] = None
    ) -> Result[User]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                user = await self.uow.users.create(
                    User(id=user_id, email=email, full_name=full_name)
                )
                await self.uow.commit()
                logger.info("Registered user mirror for %s", user_id)
                return Return.ok(user)

            if user.email == email and user.full_name == full_name:
                return Return.ok(user)

            user.email = email
            user.full_name = full_name
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(user)
