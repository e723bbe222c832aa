"""
Business Use Cases

Business CRUD and slug availability.
"""

from .check_slug_use_case import CheckSlugUseCase
from .create_business_use_case import CreateBusinessUseCase
from .delete_business_use_case import DeleteBusinessUseCase
from .dtos import (
    BusinessListResponse,
    BusinessResponse,
    DeleteBusinessResponse,
    SlugAvailabilityResponse,
)
from .get_business_use_case import GetBusinessUseCase
from .list_businesses_use_case import ListBusinessesUseCase
from .update_business_use_case import UpdateBusinessUseCase

__all__ = [
    "CreateBusinessUseCase",
    "ListBusinessesUseCase",
    "GetBusinessUseCase",
    "UpdateBusinessUseCase",
    "DeleteBusinessUseCase",
    "CheckSlugUseCase",
    "BusinessResponse",
    "BusinessListResponse",
    "SlugAvailabilityResponse",
    "DeleteBusinessResponse",
]
