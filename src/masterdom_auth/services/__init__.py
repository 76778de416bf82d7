"""Auth services."""

from masterdom_auth.services.jwt_service import JWTService
from masterdom_auth.services.password_service import PasswordHashingService

__all__ = ["JWTService", "PasswordHashingService"]
