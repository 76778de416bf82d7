"""Tests for the offer, response and category repositories."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from masterdom.domain.category import Category, CategoryAlreadyExistsError
from masterdom.domain.offer import DuplicateResponseError, OfferResponse, OfferType
from masterdom.infrastructure.persistence.sqlalchemy.models import (
    ConversationModel,
    MessageModel,
    OfferModel,
    OfferResponseModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
    OfferRepositorySQLAlchemy,
    OfferResponseRepositorySQLAlchemy,
)
from tests.shared.fixtures.seed import (
    seed_conversation,
    seed_message,
    seed_offer,
    seed_response,
    seed_user,
)


class TestOfferRepository:
    @pytest.mark.asyncio
    async def test_add_assigns_id(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")

        offer = await seed_offer(sqlite_session, anna, "Tiling")

        assert offer.id is not None
        found = await OfferRepositorySQLAlchemy(sqlite_session).find_by_id(offer.id)
        assert found.title == "Tiling"
        assert found.is_active

    @pytest.mark.asyncio
    async def test_save_toggles_active(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        repo = OfferRepositorySQLAlchemy(sqlite_session)

        offer.set_active(False)
        await repo.save(offer)
        await sqlite_session.commit()

        is_active = (
            await sqlite_session.execute(
                select(OfferModel.is_active).where(OfferModel.id == offer.id),
            )
        ).scalar_one()
        assert is_active is False

    @pytest.mark.asyncio
    async def test_count_by_type(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        await seed_offer(sqlite_session, anna, "Tiling")
        await seed_offer(sqlite_session, anna, "Painting", is_active=False)
        await seed_offer(
            sqlite_session,
            anna,
            "Fix my sink",
            offer_type=OfferType.REQUEST_FOR_SERVICE,
        )
        repo = OfferRepositorySQLAlchemy(sqlite_session)

        assert await repo.count() == 3
        assert await repo.count(OfferType.SERVICE_OFFER) == 2
        assert await repo.count(OfferType.REQUEST_FOR_SERVICE) == 1

    @pytest.mark.asyncio
    async def test_delete_cascades(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        await seed_response(sqlite_session, offer, boris)
        conversation = await seed_conversation(sqlite_session, offer, boris, anna)
        await seed_message(sqlite_session, conversation, boris, "Hi")
        await sqlite_session.commit()

        await OfferRepositorySQLAlchemy(sqlite_session).delete(offer.id)
        await sqlite_session.commit()

        for model in (OfferModel, OfferResponseModel, ConversationModel, MessageModel):
            count = (
                await sqlite_session.execute(select(func.count()).select_from(model))
            ).scalar_one()
            assert count == 0, model.__tablename__


class TestOfferResponseRepository:
    @pytest.mark.asyncio
    async def test_add_and_exists(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        repo = OfferResponseRepositorySQLAlchemy(sqlite_session)

        assert not await repo.exists(offer.id, boris.id)
        response = await seed_response(sqlite_session, offer, boris, "Available")

        assert response.id is not None
        assert response.status.value == "pending"
        assert await repo.exists(offer.id, boris.id)
        assert not await repo.exists(offer.id, anna.id)

    @pytest.mark.asyncio
    async def test_unique_pair_is_enforced_by_store(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        await seed_response(sqlite_session, offer, boris)
        await sqlite_session.commit()

        with pytest.raises(DuplicateResponseError):
            await OfferResponseRepositorySQLAlchemy(sqlite_session).add(
                OfferResponse(offer_id=offer.id, applicant_id=boris.id),
            )

    @pytest.mark.asyncio
    async def test_missing_applicant_is_not_a_duplicate(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        await sqlite_session.commit()

        with pytest.raises(IntegrityError):
            await OfferResponseRepositorySQLAlchemy(sqlite_session).add(
                OfferResponse(
                    offer_id=offer.id,
                    applicant_id=uuid4(),
                    message="I am unique",
                ),
            )


class TestCategoryRepository:
    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, sqlite_session):
        repo = CategoryRepositorySQLAlchemy(sqlite_session)
        await repo.add(Category("Plumbing"))
        await repo.add(Category("Electrical", "Wiring"))

        names = [c.name for c in await repo.list_all()]

        assert names == ["Electrical", "Plumbing"]

    @pytest.mark.asyncio
    async def test_duplicate_name(self, sqlite_session):
        repo = CategoryRepositorySQLAlchemy(sqlite_session)
        await repo.add(Category("Plumbing"))
        await sqlite_session.commit()

        with pytest.raises(CategoryAlreadyExistsError):
            await repo.add(Category("Plumbing"))

    @pytest.mark.asyncio
    async def test_rename(self, sqlite_session):
        repo = CategoryRepositorySQLAlchemy(sqlite_session)
        category = await repo.add(Category("Plumbing"))

        category.rename("Plumbing & Heating", "Pipes and boilers")
        await repo.save(category)

        found = await repo.find_by_id(category.id)
        assert found.name == "Plumbing & Heating"
        assert found.description == "Pipes and boilers"

    @pytest.mark.asyncio
    async def test_delete_keeps_offers_uncategorised(self, sqlite_session):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        repo = CategoryRepositorySQLAlchemy(sqlite_session)
        category = await repo.add(Category("Plumbing"))
        offer = await seed_offer(
            sqlite_session,
            anna,
            "Fix pipes",
            category_id=category.id,
        )
        await sqlite_session.commit()

        await repo.delete(category.id)
        await sqlite_session.commit()

        category_id = (
            await sqlite_session.execute(
                select(OfferModel.category_id).where(OfferModel.id == offer.id),
            )
        ).scalar_one()
        assert category_id is None
        assert await repo.find_by_id(category.id) is None
