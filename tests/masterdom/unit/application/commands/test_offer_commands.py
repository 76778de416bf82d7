"""Unit tests for offer commands."""

from unittest.mock import AsyncMock

import pytest

from masterdom.application.commands.offers import (
    CreateOfferCommand,
    DeleteOfferCommand,
    RespondToOfferCommand,
    SetOfferActiveCommand,
)
from masterdom.domain.category import Category, CategoryNotFoundError
from masterdom.domain.offer import (
    DuplicateResponseError,
    InvalidOfferError,
    OfferNotFoundError,
    OfferType,
    ResponseStatus,
)
from tests.shared.fixtures.factories import TestUserFactory, make_offer


def _assign_id(new_id: int):
    """Side effect emulating a store that assigns ids on insert."""

    async def add(entity):
        entity._id = new_id
        return entity

    return add


@pytest.fixture
def alice_ctx():
    return TestUserFactory.context(TestUserFactory.alice())


@pytest.fixture
def offer_repo():
    return AsyncMock()


@pytest.fixture
def category_repo():
    return AsyncMock()


@pytest.fixture
def response_repo():
    return AsyncMock()


class TestCreateOfferCommand:
    @pytest.mark.asyncio
    async def test_creates_active_offer_for_current_user(
        self,
        offer_repo,
        category_repo,
        alice_ctx,
    ):
        offer_repo.add.side_effect = _assign_id(7)
        category_repo.find_by_id.return_value = Category("Tiling", id=3)
        command = CreateOfferCommand(offer_repo, category_repo, alice_ctx)

        offer = await command.execute(
            offer_type="service_offer",
            title="Bathroom tiling",
            description="Ten years of tiling",
            category_id=3,
        )

        assert offer.id == 7
        assert offer.author_id == TestUserFactory.ALICE_ID
        assert offer.offer_type == OfferType.SERVICE_OFFER
        assert offer.is_active
        category_repo.find_by_id.assert_awaited_once_with(3)
        offer_repo.add.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rejects_unknown_type(self, offer_repo, category_repo, alice_ctx):
        command = CreateOfferCommand(offer_repo, category_repo, alice_ctx)

        with pytest.raises(InvalidOfferError, match="service_offer"):
            await command.execute(offer_type="haircut", title="Trim")

        offer_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_unknown_category(self, offer_repo, category_repo, alice_ctx):
        category_repo.find_by_id.return_value = None
        command = CreateOfferCommand(offer_repo, category_repo, alice_ctx)

        with pytest.raises(CategoryNotFoundError):
            await command.execute(
                offer_type="request_for_service",
                title="Fix sink",
                category_id=99,
            )

        offer_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_category_is_optional(self, offer_repo, category_repo, alice_ctx):
        offer_repo.add.side_effect = _assign_id(1)
        command = CreateOfferCommand(offer_repo, category_repo, alice_ctx)

        offer = await command.execute(offer_type="request_for_service", title="Fix")

        assert offer.category_id is None
        category_repo.find_by_id.assert_not_awaited()


class TestRespondToOfferCommand:
    @pytest.mark.asyncio
    async def test_creates_pending_response(self, offer_repo, response_repo):
        bob = TestUserFactory.bob()
        offer_repo.find_by_id.return_value = make_offer(TestUserFactory.ALICE_ID)
        response_repo.exists.return_value = False
        response_repo.add.side_effect = _assign_id(11)
        command = RespondToOfferCommand(
            offer_repo,
            response_repo,
            TestUserFactory.context(bob),
        )

        response = await command.execute(1, message="I can do it tomorrow")

        assert response.id == 11
        assert response.applicant_id == bob.id
        assert response.status == ResponseStatus.PENDING
        assert response.message == "I can do it tomorrow"

    @pytest.mark.asyncio
    async def test_missing_offer(self, offer_repo, response_repo, alice_ctx):
        offer_repo.find_by_id.return_value = None
        command = RespondToOfferCommand(offer_repo, response_repo, alice_ctx)

        with pytest.raises(OfferNotFoundError):
            await command.execute(404)

        response_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_response_is_rejected(
        self,
        offer_repo,
        response_repo,
        alice_ctx,
    ):
        offer_repo.find_by_id.return_value = make_offer(TestUserFactory.BOB_ID)
        response_repo.exists.return_value = True
        command = RespondToOfferCommand(offer_repo, response_repo, alice_ctx)

        with pytest.raises(DuplicateResponseError):
            await command.execute(1)

        response_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_level_duplicate_propagates(
        self,
        offer_repo,
        response_repo,
        alice_ctx,
    ):
        offer_repo.find_by_id.return_value = make_offer(TestUserFactory.BOB_ID)
        response_repo.exists.return_value = False
        response_repo.add.side_effect = DuplicateResponseError(1, "alice")
        command = RespondToOfferCommand(offer_repo, response_repo, alice_ctx)

        with pytest.raises(DuplicateResponseError):
            await command.execute(1)


class TestSetOfferActiveCommand:
    @pytest.mark.asyncio
    async def test_deactivates(self, offer_repo):
        offer = make_offer(TestUserFactory.ALICE_ID)
        offer_repo.find_by_id.return_value = offer

        result = await SetOfferActiveCommand(offer_repo).execute(1, False)

        assert result.is_active is False
        offer_repo.save.assert_awaited_once_with(offer)

    @pytest.mark.asyncio
    async def test_missing_offer(self, offer_repo):
        offer_repo.find_by_id.return_value = None

        with pytest.raises(OfferNotFoundError):
            await SetOfferActiveCommand(offer_repo).execute(1, True)


class TestDeleteOfferCommand:
    @pytest.mark.asyncio
    async def test_deletes(self, offer_repo):
        offer_repo.find_by_id.return_value = make_offer(TestUserFactory.ALICE_ID)

        await DeleteOfferCommand(offer_repo).execute(1)

        offer_repo.delete.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_missing_offer(self, offer_repo):
        offer_repo.find_by_id.return_value = None

        with pytest.raises(OfferNotFoundError):
            await DeleteOfferCommand(offer_repo).execute(1)

        offer_repo.delete.assert_not_awaited()
