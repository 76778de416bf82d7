"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from masterdom.domain.user import User
    from masterdom_auth import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    Built once per request from the verified token claims. Commands and
    queries read the acting identity from here and never from request
    bodies.
    """

    user_id: UUID
    email: str
    is_admin: bool = False

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email, is_admin=user.is_admin)

    @classmethod
    def from_token(cls, payload: TokenPayload) -> UserContext:
        return cls(
            user_id=payload.user_id,
            email=payload.email,
            is_admin=payload.is_admin,
        )

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return (
            f"UserContext(user_id={self.user_id}, "
            f"email={self.email!r}, is_admin={self.is_admin})"
        )
