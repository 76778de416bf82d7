"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import UUID

import jwt
import pytest

from masterdom_auth import InvalidTokenError, JWTService

USER_ID = UUID("12345678-1234-5678-1234-567812345678")
SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET, access_token_expire_hours=1)


class TestJWTService:
    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="")

    def test_round_trip_claims(self, service):
        token = service.create_access_token(USER_ID, "anna@example.com", True)

        payload = service.verify_token(token)

        assert payload.user_id == USER_ID
        assert payload.email == "anna@example.com"
        assert payload.is_admin is True
        assert payload.is_access_token()
        assert not payload.is_expired()

    def test_lifetime(self, service):
        assert service.access_token_lifetime == timedelta(hours=1)

    def test_expired_token(self, service):
        token = service.create_access_token(
            USER_ID,
            "anna@example.com",
            False,
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            service.verify_token(token)

    def test_wrong_signature(self, service):
        other = JWTService(secret_key="another-secret-that-is-long-enough-for-hs256")
        token = other.create_access_token(USER_ID, "anna@example.com", False)

        with pytest.raises(InvalidTokenError):
            service.verify_token(token)

    def test_garbage_token(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify_token("not.a.token")

    def test_non_boolean_admin_claim_is_rejected(self, service):
        token = jwt.encode(
            {
                "sub": str(USER_ID),
                "email": "anna@example.com",
                "is_admin": "yes",
                "exp": 9999999999,
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            service.verify_token(token)

    def test_missing_subject_is_rejected(self, service):
        token = jwt.encode({"exp": 9999999999}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            service.verify_token(token)
