"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory

    def test_something():
        user = TestUserFactory.alice()
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from masterdom.application.context import UserContext
from masterdom.domain.offer import Offer, OfferType
from masterdom.domain.user import Profile, User, UserRole

# Any syntactically valid bcrypt hash; unit tests never verify it
FAKE_PASSWORD_HASH = "$2b$04$" + "a" * 53


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for users with fixed, recognizable IDs."""

    __test__ = False

    ALICE_ID = UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
    ALICE_EMAIL = "alice@example.com"

    BOB_ID = UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb")
    BOB_EMAIL = "bob@example.com"

    ADMIN_ID = UUID("00000000-0000-0000-0000-000000000001")
    ADMIN_EMAIL = "admin@example.com"

    ROOT_ID = UUID("00000000-0000-0000-0000-0000000000ff")
    ROOT_EMAIL = "root@example.com"

    @classmethod
    def _build(
        cls,
        user_id: UUID,
        email: str,
        first_name: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        return User(
            id=user_id,
            email=email,
            password_hash=FAKE_PASSWORD_HASH,
            profile=Profile(first_name=first_name),
            role=role,
        )

    @classmethod
    def alice(cls) -> User:
        return cls._build(cls.ALICE_ID, cls.ALICE_EMAIL, "Alice")

    @classmethod
    def bob(cls) -> User:
        return cls._build(cls.BOB_ID, cls.BOB_EMAIL, "Bob")

    @classmethod
    def admin(cls) -> User:
        return cls._build(cls.ADMIN_ID, cls.ADMIN_EMAIL, "Ada", role=UserRole.ADMIN)

    @classmethod
    def root(cls) -> User:
        """The configured super-admin."""
        return cls._build(cls.ROOT_ID, cls.ROOT_EMAIL, "Root", role=UserRole.ADMIN)

    @staticmethod
    def context(user: User) -> UserContext:
        return UserContext.create(user)


def make_offer(
    author_id: UUID,
    offer_id: Optional[int] = 1,
    title: str = "Bathroom tiling",
    offer_type: OfferType = OfferType.SERVICE_OFFER,
    is_active: bool = True,
) -> Offer:
    return Offer(
        id=offer_id,
        author_id=author_id,
        offer_type=offer_type,
        title=title,
        is_active=is_active,
    )
