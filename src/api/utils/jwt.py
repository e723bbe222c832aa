from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def create_access_token(
    user_id: str,
    email: str,
    full_name: Optional[str] = None,
    expires_delta: timedelta = timedelta(hours=1),
) -> str:
    """
    Create a JWT access token shaped like the identity provider's tokens

    Used by tests and local tooling; production tokens are issued upstream.

    Args:
        user_id: User UUID as string (``sub`` claim)
        email: Email address of the user
        full_name: Optional display name (``user_metadata.full_name``)
        expires_delta: Token expiration duration

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "sub": user_id,
        "email": email,
        "aud": ApplicationConfig.JWT_AUDIENCE,
        "user_metadata": {"full_name": full_name} if full_name else {},
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
            audience=ApplicationConfig.JWT_AUDIENCE,
        )
    except JWTError:
        return None

    if not payload.get("sub") or not payload.get("email"):
        return None
    return payload
