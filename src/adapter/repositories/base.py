from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import RepositoryError, UniqueViolationError
from src.domain.base import utcnow


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    # Postgres drivers expose SQLSTATE; SQLite only has the message
    if getattr(orig, "sqlstate", None) == "23505" or getattr(orig, "pgcode", None) == "23505":
        return True
    return "unique" in str(orig).lower()


class SqlModelRepository:
    """Shared session plumbing; translates SQLAlchemy failures into RepositoryError"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _first(self, stmt, operation: str, **context) -> Optional[Any]:
        try:
            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as exc:
            raise RepositoryError(operation, context) from exc

    async def _all(self, stmt, operation: str, **context) -> List[Any]:
        try:
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as exc:
            raise RepositoryError(operation, context) from exc

    async def _save(self, entity, operation: str, touch: bool = False, **context):
        if touch:
            entity.updated_at = utcnow()
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise UniqueViolationError(operation, context) from exc
            raise RepositoryError(operation, context) from exc
        except SQLAlchemyError as exc:
            raise RepositoryError(operation, context) from exc
        return entity

    async def _delete(self, entity, operation: str, **context) -> None:
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise RepositoryError(operation, context) from exc
