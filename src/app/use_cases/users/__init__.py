"""
User Use Cases
"""

from .sync_user_use_case import SyncUserUseCase

__all__ = [
    "SyncUserUseCase",
]
