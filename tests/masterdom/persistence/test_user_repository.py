"""Tests for UserRepositorySQLAlchemy."""

import pytest
from sqlalchemy import func, select

from masterdom.domain.offer import OfferType
from masterdom.domain.user import (
    EmailAlreadyExistsError,
    Profile,
    ProfilePatch,
    User,
    UserRole,
)
from masterdom.infrastructure.persistence.sqlalchemy.models import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
    OfferModel,
    OfferResponseModel,
    ProfileModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import FAKE_PASSWORD_HASH
from tests.shared.fixtures.seed import (
    seed_conversation,
    seed_message,
    seed_offer,
    seed_response,
    seed_user,
)


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_with_profile(self, sqlite_session):
        repo = UserRepositorySQLAlchemy(sqlite_session)
        user = User.create(
            "anna@example.com",
            FAKE_PASSWORD_HASH,
            Profile(first_name="Anna", bio="Tiler", years_of_experience=7),
        )
        await repo.save(user)

        found = await repo.find_by_email("ANNA@example.com")

        assert found is not None
        assert found.id == user.id
        assert found.profile.bio == "Tiler"
        assert found.profile.years_of_experience == 7
        assert found.role == UserRole.USER
        assert await repo.exists_by_email("anna@example.com")

    @pytest.mark.asyncio
    async def test_unknown_user(self, sqlite_session):
        repo = UserRepositorySQLAlchemy(sqlite_session)

        assert await repo.find_by_email("ghost@example.com") is None
        assert not await repo.exists_by_email("ghost@example.com")

    @pytest.mark.asyncio
    async def test_duplicate_email(self, sqlite_session):
        await seed_user(sqlite_session, "anna@example.com", "Anna")
        repo = UserRepositorySQLAlchemy(sqlite_session)
        twin = User.create("anna@example.com", FAKE_PASSWORD_HASH, Profile("Twin"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(twin)

    @pytest.mark.asyncio
    async def test_update_profile_and_role(self, sqlite_session):
        user = await seed_user(sqlite_session, "anna@example.com", "Anna")
        repo = UserRepositorySQLAlchemy(sqlite_session)

        user.update_profile(ProfilePatch(last_name="Ivanova", bio=None))
        user.promote_to_admin()
        await repo.save(user)
        await sqlite_session.commit()

        reloaded = await repo.find_by_id(user.id)
        assert reloaded.is_admin
        assert reloaded.profile.last_name == "Ivanova"
        assert reloaded.profile.first_name == "Anna"

    @pytest.mark.asyncio
    async def test_count_and_list_all(self, sqlite_session):
        await seed_user(sqlite_session, "first@example.com", "First")
        await seed_user(sqlite_session, "second@example.com", "Second")
        repo = UserRepositorySQLAlchemy(sqlite_session)

        assert await repo.count() == 2
        assert [u.email for u in await repo.list_all()] == [
            "first@example.com",
            "second@example.com",
        ]

    @pytest.mark.asyncio
    async def test_delete_cascades_to_owned_rows(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        anna_offer = await seed_offer(sqlite_session, anna, "Tiling")
        boris_offer = await seed_offer(
            sqlite_session,
            boris,
            "Need a tiler",
            offer_type=OfferType.REQUEST_FOR_SERVICE,
        )
        await seed_response(sqlite_session, boris_offer, anna, "Me!")
        conversation = await seed_conversation(sqlite_session, boris_offer, anna, boris)
        await seed_message(sqlite_session, conversation, anna, "Hello")
        await sqlite_session.commit()

        await UserRepositorySQLAlchemy(sqlite_session).delete(anna.id)
        await sqlite_session.commit()

        assert await _count(sqlite_session, ProfileModel) == 1
        remaining_offers = (
            (await sqlite_session.execute(select(OfferModel.id))).scalars().all()
        )
        assert remaining_offers == [boris_offer.id]
        assert anna_offer.id not in remaining_offers
        assert await _count(sqlite_session, OfferResponseModel) == 0
        assert await _count(sqlite_session, ConversationModel) == 0
        assert await _count(sqlite_session, ConversationParticipantModel) == 0
        assert await _count(sqlite_session, MessageModel) == 0
