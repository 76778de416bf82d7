"""SQLAlchemy model for the credential half of the User aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from masterdom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from masterdom.infrastructure.persistence.sqlalchemy.models.user.profile_model import (  # NOQA: E501
        ProfileModel,
    )


class UserModel(Base, TimestampMixin):
    """
    Credential store row.

    - id is a random UUID4 generated by the domain
    - email is unique and stored lower-cased
    - role is 'user' or 'admin'

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")

    profile: Mapped[ProfileModel] = relationship(
        back_populates="user",
        lazy="joined",
        uselist=False,
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"
