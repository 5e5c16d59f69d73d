"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.jwt import JWTError

SECRET = "unit-test-secret-0123456789abcdef0123"
OTHER_SECRET = "another-secret-0123456789abcdef01234"


class TestJWTService:
    """Tests for JWTService."""

    def test_round_trip_user_id(self):
        service = JWTService(AuthSettings(jwt_secret=SECRET))

        token = service.create_token("user-123")

        assert service.get_user_id_from_token(token) == "user-123"

    def test_wrong_secret_is_rejected(self):
        issuer = JWTService(AuthSettings(jwt_secret=SECRET))
        verifier = JWTService(AuthSettings(jwt_secret=OTHER_SECRET))

        token = issuer.create_token("user-123")

        with pytest.raises(JWTError):
            verifier.verify_token(token)
        assert verifier.get_user_id_from_token(token) is None

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_secret=SECRET)
        token = jwt.encode(
            {
                "user_id": "user-123",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            JWTService(settings).verify_token(token)

    def test_token_without_user_id_is_rejected(self):
        settings = AuthSettings(jwt_secret=SECRET)
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        assert JWTService(settings).get_user_id_from_token(token) is None

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_unauthenticated(self, token):
        service = JWTService(AuthSettings())

        assert service.get_user_id_from_token(token) is None
