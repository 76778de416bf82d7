"""Data carried by verified tokens."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a token whose signature has been checked.

    ``is_admin`` reflects the role at issue time, not the current one.
    """

    user_id: UUID
    email: str
    is_admin: bool
    exp: datetime
    token_type: str = ACCESS_TOKEN_TYPE

    def is_expired(self) -> bool:
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN_TYPE
