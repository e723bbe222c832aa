"""
Brand Kit Use Cases

Brand kit storage and public share links.
"""

from .create_brand_kit_use_case import CreateBrandKitUseCase
from .delete_brand_kit_use_case import DeleteBrandKitUseCase
from .dtos import (
    BrandKitResponse,
    ColorData,
    DeleteBrandKitResponse,
    FontData,
    RevokeShareLinkResponse,
    ShareLinkResponse,
    SharedBrandKitResponse,
)
from .get_brand_kit_use_case import GetBrandKitUseCase
from .share_link_use_cases import (
    CreateShareLinkUseCase,
    GetSharedBrandKitUseCase,
    RevokeShareLinkUseCase,
)
from .update_brand_kit_use_case import UpdateBrandKitUseCase

__all__ = [
    "CreateBrandKitUseCase",
    "GetBrandKitUseCase",
    "UpdateBrandKitUseCase",
    "DeleteBrandKitUseCase",
    "CreateShareLinkUseCase",
    "RevokeShareLinkUseCase",
    "GetSharedBrandKitUseCase",
    "BrandKitResponse",
    "SharedBrandKitResponse",
    "ShareLinkResponse",
    "DeleteBrandKitResponse",
    "RevokeShareLinkResponse",
    "ColorData",
    "FontData",
]
