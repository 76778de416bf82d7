from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from masterdom.domain.shared.time import utc_now
from masterdom.domain.user.value_objects import (
    Email,
    Profile,
    ProfilePatch,
    UserRole,
)


class User:
    """
    User aggregate root.

    Combines the credential record (email, password hash, role) with the
    user's profile. Both halves are persisted together and created in one
    transaction. Each user is identified by a random UUID generated at
    creation time.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        profile: Profile,
        role: Union[str, UserRole] = UserRole.USER,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id if id is not None else uuid4()
        self._password_hash = password_hash
        self._profile = profile
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def promote_to_admin(self) -> None:
        self._role = UserRole.ADMIN
        self._updated_at = utc_now()

    def demote_to_user(self) -> None:
        self._role = UserRole.USER
        self._updated_at = utc_now()

    def update_profile(self, patch: ProfilePatch) -> None:
        # Absent attributes are preserved; None and "" overwrite.
        self._profile = self._profile.apply(patch)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        profile: Profile,
        role: UserRole = UserRole.USER,
    ) -> "User":
        return cls(
            email=email,
            password_hash=password_hash,
            profile=profile,
            role=role,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        profile: Profile,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            profile=profile,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
