"""
Store Boundary

Converts storage failures escaping a use case into a generic STORE_ERROR
result. The raw failure is logged with the operation name and entity ids;
callers only ever see the generic message.
"""

import functools
import logging

from sqlalchemy.exc import SQLAlchemyError

from src.app.repositories.errors import RepositoryError
from src.libs.result import Error, Return

logger = logging.getLogger(__name__)

STORE_ERROR_MESSAGE = "Something went wrong. Please try again."


def _store_error(reason: str):
    return Return.err(Error("STORE_ERROR", STORE_ERROR_MESSAGE, reason=reason))


def store_boundary(operation: str):
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except RepositoryError as exc:
                logger.error(
                    "Store failure during %s at %s context=%s",
                    operation,
                    exc.operation,
                    exc.context,
                    exc_info=True,
                )
                return _store_error(exc.operation)
            except SQLAlchemyError:
                # Raised by a store call no repository wrapped
                logger.error("Store failure during %s", operation, exc_info=True)
                return _store_error(operation)

        return wrapper

    return decorator
