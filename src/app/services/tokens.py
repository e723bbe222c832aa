"""
URL Tokens

Opaque tokens addressing invitations and brand kit share links.
"""

import secrets
from typing import Callable, Optional

TOKEN_BYTES = 32

RandomBytes = Callable[[int], bytes]


def generate_token(random_bytes: Optional[RandomBytes] = None) -> str:
    """32 random bytes, hex encoded (64 characters)"""
    return (random_bytes or secrets.token_bytes)(TOKEN_BYTES).hex()
