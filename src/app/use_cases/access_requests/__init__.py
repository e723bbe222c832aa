"""
Access Request Use Cases
"""

from .create_access_request_use_case import CreateAccessRequestUseCase
from .dtos import (
    AccessRequestListResponse,
    AccessRequestResponse,
    WithdrawAccessRequestResponse,
)
from .list_access_requests_use_case import ListAccessRequestsUseCase
from .review_access_request_use_case import (
    ApproveAccessRequestUseCase,
    RejectAccessRequestUseCase,
)
from .withdraw_access_request_use_case import WithdrawAccessRequestUseCase

__all__ = [
    "CreateAccessRequestUseCase",
    "ListAccessRequestsUseCase",
    "ApproveAccessRequestUseCase",
    "RejectAccessRequestUseCase",
    "WithdrawAccessRequestUseCase",
    "AccessRequestResponse",
    "AccessRequestListResponse",
    "WithdrawAccessRequestResponse",
]
