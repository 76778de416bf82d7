"""Issue and check HS256 access tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from masterdom_auth.exceptions import InvalidTokenError
from masterdom_auth.schemas import ACCESS_TOKEN_TYPE, TokenPayload


class JWTService:
    """Sign and verify bearer tokens with one shared secret.

    A token carries the user id (``sub``), email, admin flag, kind and
    expiry. The admin flag is fixed at issue time, so a role change shows
    up only in tokens issued afterwards.

    Examples
    --------
    >>> service = JWTService(secret_key="a-long-random-secret-of-32-bytes!")
    >>> token = service.create_access_token(user_id, "anna@example.com", False)
    >>> service.verify_token(token).email
    'anna@example.com'
    """

    ALGORITHM = "HS256"
    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    REQUIRED_CLAIMS = ("sub", "email", "exp")

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            raise ValueError("JWT secret key cannot be empty")
        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._lifetime

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        is_admin: bool,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Return a signed token for the given identity.

        ``expires_delta`` replaces the configured lifetime; a negative value
        yields an already expired token.
        """
        issued_at = datetime.now(tz=timezone.utc)
        lifetime = self._lifetime if expires_delta is None else expires_delta
        claims = {
            "sub": str(user_id),
            "email": email,
            "is_admin": is_admin,
            "type": ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry, then parse the claims.

        Raises
        ------
        InvalidTokenError
            For an expired, forged or garbled token, and for claims of the
            wrong shape.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return self._to_payload(claims)
        except (ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    @staticmethod
    def _to_payload(claims: dict[str, Any]) -> TokenPayload:
        is_admin = claims.get("is_admin", False)
        if not isinstance(is_admin, bool):
            raise TypeError("is_admin claim must be a boolean")
        email = claims["email"]
        if not isinstance(email, str):
            raise TypeError("email claim must be a string")
        return TokenPayload(
            user_id=UUID(claims["sub"]),
            email=email,
            is_admin=is_admin,
            exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            token_type=claims.get("type", ACCESS_TOKEN_TYPE),
        )
