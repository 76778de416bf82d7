"""Profile value objects.

A Profile holds the mutable, public-facing attributes of a user. It is
kept apart from identity (email, password hash, role) and is replaced
as a whole on every change.

ProfilePatch describes a partial update. Each attribute is either
UNSET (leave the stored value untouched) or a concrete value, where
None and "" are concrete values that overwrite.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

from masterdom.domain.user.exceptions import InvalidProfileError


class _Unset:
    """Marker type for attributes absent from a partial update."""

    _instance: Optional[_Unset] = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Profile:
    """Public profile attributes of a user."""

    first_name: str
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    years_of_experience: Optional[int] = None
    average_rating: Optional[float] = None

    def __post_init__(self) -> None:
        if self.first_name is None or not str(self.first_name).strip():
            msg = "First name cannot be empty"
            raise InvalidProfileError(msg)
        if self.years_of_experience is not None and self.years_of_experience < 0:
            msg = "Years of experience cannot be negative"
            raise InvalidProfileError(msg)

    def apply(self, patch: ProfilePatch) -> Profile:
        """Return a copy with every supplied attribute of ``patch`` applied."""
        return replace(self, **patch.supplied())


@dataclass(frozen=True)
class ProfilePatch:
    """Partial profile update with explicit presence per attribute.

    average_rating is not patchable; it is derived from reviews.
    """

    first_name: Union[str, _Unset] = UNSET
    last_name: Union[Optional[str], _Unset] = UNSET
    phone_number: Union[Optional[str], _Unset] = UNSET
    bio: Union[Optional[str], _Unset] = UNSET
    years_of_experience: Union[Optional[int], _Unset] = UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProfilePatch:
        """Build a patch from a mapping in which key presence means "set".

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def supplied(self) -> dict[str, Any]:
        """Attributes that carry a value, keyed by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.supplied()
