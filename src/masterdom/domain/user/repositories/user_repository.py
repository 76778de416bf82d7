"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from masterdom.domain.user.aggregates.user import User
from masterdom.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates (credentials + profile)."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier (UUID4)

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user together with their profile.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user; owned rows are removed by cascading foreign keys."""

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return all users ordered by registration time."""
