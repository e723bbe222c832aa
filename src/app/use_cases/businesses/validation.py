import re
from typing import Optional

from src.libs.result import Error

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
SLUG_MAX_LENGTH = 255


def validate_slug(slug: str) -> Optional[Error]:
    """Returns an INVALID_SLUG error, or None when the slug is usable."""
    if not slug or len(slug) > SLUG_MAX_LENGTH:
        return Error("INVALID_SLUG", "Slug must be between 1 and 255 characters")
    if not SLUG_PATTERN.match(slug):
        return Error(
            "INVALID_SLUG",
            "Slug can only contain lowercase letters, numbers, and hyphens",
        )
    if slug.startswith("-") or slug.endswith("-"):
        return Error("INVALID_SLUG", "Slug cannot start or end with a hyphen")
    return None
