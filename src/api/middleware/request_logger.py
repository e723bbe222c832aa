import logging
import re
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("request")

# Invitation tokens travel in the path and grant access
_TOKEN_RE = re.compile(r"\b[0-9a-f]{64}\b")


def _redact_path(path: str) -> str:
    return _TOKEN_RE.sub("[REDACTED_TOKEN]", path)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        path = _redact_path(request.url.path)

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "%s %s -> unhandled error (%.1f ms)", request.method, path, duration_ms
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            path,
            response.status_code,
            duration_ms,
        )
        return response
