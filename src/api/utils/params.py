from uuid import UUID

from fastapi import status

from src.api.error import ClientError
from src.libs.result import Error


def parse_uuid(value: str, code: str, label: str) -> UUID:
    """Parse a path id, raising 400 with the given error code on bad format"""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error(code, f"Invalid {label} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
