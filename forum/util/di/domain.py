"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
from forum.domain.repository import LikeRepository
from forum.domain.service import JWTService, LikeService
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)
