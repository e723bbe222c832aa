from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.api.utils.jwt import verify_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import SyncUserUseCase
from src.libs.result import Error


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
if engine.dialect.name == "sqlite":
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> dict:
    """
    Dependency to verify the bearer token and sync the caller's identity.

    Returns:
        Dict with user_id, email and full_name of the caller

    Raises:
        ClientError: 401 UNAUTHENTICATED if the token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Authentication required. Please sign in."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        user_id = UUID(payload["sub"])
    except ValueError:
        raise ClientError(
            Error("UNAUTHENTICATED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    full_name = (payload.get("user_metadata") or {}).get("full_name")

    result = await SyncUserUseCase(uow).execute(user_id, payload["email"], full_name)
    if result.is_err():
        raise ServerError(result.error)

    return {
        "user_id": str(user_id),
        "email": payload["email"],
        "full_name": full_name,
    }
