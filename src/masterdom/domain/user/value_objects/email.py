"""Email value object used as the login identity."""

import re
from dataclasses import dataclass

from masterdom.domain.user.exceptions import InvalidEmailError

MAX_EMAIL_LENGTH = 254

_LOCAL_PART = re.compile(r"^[a-z0-9._%+-]+$")
_DOMAIN = re.compile(r"^[a-z0-9.-]+\.[a-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """
    A login email, trimmed and lower-cased on construction.

    Two emails that differ only in case or surrounding whitespace compare
    equal, which is what the unique index on ``users.email`` relies on.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise InvalidEmailError("Email cannot be empty")
        if len(normalized) > MAX_EMAIL_LENGTH:
            raise InvalidEmailError("Email is too long")

        local, at, domain = normalized.rpartition("@")
        if not at or not _LOCAL_PART.match(local) or not _DOMAIN.match(domain):
            raise InvalidEmailError(f"Invalid email format: {self.value}")

        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value
