"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .like_service import LikeService

__all__ = [
    "JWTService",
    "LikeService",
    "Service",
]
