"""
Permission Use Cases
"""

from .get_permissions_use_case import GetPermissionsUseCase

__all__ = [
    "GetPermissionsUseCase",
]
