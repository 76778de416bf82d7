"""Tests for the offer and chat read adapters."""

import pytest

from masterdom.application.dtos.offers import OfferFilter
from masterdom.domain.category import Category
from masterdom.domain.offer import OfferType
from masterdom.infrastructure.persistence.sqlalchemy.adapters import (
    SqlAlchemyChatReadAdapter,
    SqlAlchemyOfferReadAdapter,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
)
from tests.shared.fixtures.seed import (
    seed_conversation,
    seed_message,
    seed_offer,
    seed_response,
    seed_user,
)


@pytest.fixture
def offer_read(sqlite_session) -> SqlAlchemyOfferReadAdapter:
    return SqlAlchemyOfferReadAdapter(sqlite_session)


@pytest.fixture
def chat_read(sqlite_session) -> SqlAlchemyChatReadAdapter:
    return SqlAlchemyChatReadAdapter(sqlite_session)


class TestOfferListing:
    @pytest.mark.asyncio
    async def test_only_active_newest_first(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        first = await seed_offer(sqlite_session, anna, "First")
        await seed_offer(sqlite_session, anna, "Hidden", is_active=False)
        second = await seed_offer(sqlite_session, anna, "Second")

        items = await offer_read.list_active_offers(OfferFilter())

        assert [i.id for i in items] == [second.id, first.id]
        assert items[0].author_first_name == "Anna"
        assert items[0].author_id == anna.id
        assert items[0].has_responded is False

    @pytest.mark.asyncio
    async def test_filters_combine(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        plumbing = await CategoryRepositorySQLAlchemy(sqlite_session).add(
            Category("Plumbing"),
        )
        match = await seed_offer(
            sqlite_session,
            anna,
            "Leaking PIPE repair",
            category_id=plumbing.id,
        )
        await seed_offer(
            sqlite_session,
            anna,
            "Pipe repair wanted",
            offer_type=OfferType.REQUEST_FOR_SERVICE,
            category_id=plumbing.id,
        )
        await seed_offer(sqlite_session, anna, "Pipe organ tuning")

        items = await offer_read.list_active_offers(
            OfferFilter(
                offer_type=OfferType.SERVICE_OFFER,
                search="pipe",
                category_id=plumbing.id,
            ),
        )

        assert [i.id for i in items] == [match.id]

    @pytest.mark.asyncio
    async def test_search_matches_description(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        offer = await seed_offer(
            sqlite_session,
            anna,
            "Handyman",
            description="Small jobs, including TILING",
        )
        await seed_offer(sqlite_session, anna, "Gardener")

        items = await offer_read.list_active_offers(OfferFilter(search="tiling"))

        assert [i.id for i in items] == [offer.id]

    @pytest.mark.asyncio
    async def test_search_wildcards_are_literal(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        discount = await seed_offer(sqlite_session, anna, "50% off painting")
        await seed_offer(sqlite_session, anna, "500 square meters painted")

        items = await offer_read.list_active_offers(OfferFilter(search="50%"))

        assert [i.id for i in items] == [discount.id]

    @pytest.mark.asyncio
    async def test_has_responded_is_per_viewer(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        cveta = await seed_user(sqlite_session, "cveta@example.com", "Cveta")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        await seed_response(sqlite_session, offer, boris)

        for_boris = await offer_read.list_active_offers(OfferFilter(), boris.id)
        for_cveta = await offer_read.list_active_offers(OfferFilter(), cveta.id)

        assert for_boris[0].has_responded is True
        assert for_cveta[0].has_responded is False

    @pytest.mark.asyncio
    async def test_applications_newest_first(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(
            sqlite_session,
            "boris@example.com",
            "Boris",
            average_rating=4.8,
        )
        cveta = await seed_user(sqlite_session, "cveta@example.com", "Cveta")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        await seed_response(sqlite_session, offer, boris, "Can start Monday")
        await seed_response(sqlite_session, offer, cveta)

        applications = await offer_read.list_applications(offer.id)

        assert [a.applicant_first_name for a in applications] == ["Cveta", "Boris"]
        assert applications[1].applicant_rating == 4.8
        assert applications[1].message == "Can start Monday"
        assert applications[1].status == "pending"

    @pytest.mark.asyncio
    async def test_admin_listing_includes_inactive(self, sqlite_session, offer_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        visible = await seed_offer(sqlite_session, anna, "Visible")
        hidden = await seed_offer(sqlite_session, anna, "Hidden", is_active=False)

        offers = await offer_read.list_all_offers()

        assert [o.id for o in offers] == [hidden.id, visible.id]
        assert offers[0].is_active is False
        assert offers[0].author_email == "anna@example.com"


class TestChatReads:
    @pytest.mark.asyncio
    async def test_conversation_list_orders_by_latest_activity(
        self,
        sqlite_session,
        chat_read,
    ):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        cveta = await seed_user(sqlite_session, "cveta@example.com", "Cveta")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        with_boris = await seed_conversation(sqlite_session, offer, boris, anna)
        with_cveta = await seed_conversation(sqlite_session, offer, cveta, anna)
        await seed_message(sqlite_session, with_cveta, cveta, "Hi from Cveta")
        await seed_message(sqlite_session, with_boris, boris, "Hi from Boris")
        await seed_message(sqlite_session, with_boris, anna, "Hello Boris")

        previews = await chat_read.list_conversations(anna.id)

        assert [p.conversation_id for p in previews] == [with_boris.id, with_cveta.id]
        assert previews[0].other_participant_name == "Boris"
        assert previews[0].other_participant_id == boris.id
        assert previews[0].last_message == "Hello Boris"
        assert previews[0].offer_title == "Tiling"
        assert previews[1].last_message == "Hi from Cveta"

    @pytest.mark.asyncio
    async def test_empty_conversation_uses_creation_time(
        self,
        sqlite_session,
        chat_read,
    ):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        conversation = await seed_conversation(sqlite_session, offer, boris, anna)

        previews = await chat_read.list_conversations(boris.id)

        assert len(previews) == 1
        assert previews[0].conversation_id == conversation.id
        assert previews[0].last_message is None
        assert previews[0].last_activity_at is not None
        assert previews[0].other_participant_name == "Anna"

    @pytest.mark.asyncio
    async def test_outsider_sees_nothing(self, sqlite_session, chat_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        cveta = await seed_user(sqlite_session, "cveta@example.com", "Cveta")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        await seed_conversation(sqlite_session, offer, boris, anna)

        assert await chat_read.list_conversations(cveta.id) == []

    @pytest.mark.asyncio
    async def test_details_and_messages(self, sqlite_session, chat_read):
        anna = await seed_user(sqlite_session, "anna@example.com", "Anna")
        boris = await seed_user(sqlite_session, "boris@example.com", "Boris")
        offer = await seed_offer(sqlite_session, anna, "Tiling")
        conversation = await seed_conversation(sqlite_session, offer, boris, anna)
        await seed_message(sqlite_session, conversation, boris, "First")
        await seed_message(sqlite_session, conversation, anna, "Second")

        details = await chat_read.get_details(conversation.id)
        messages = await chat_read.list_messages(conversation.id)

        assert details.offer_title == "Tiling"
        assert {p.first_name for p in details.participants} == {"Anna", "Boris"}
        assert [m.content for m in messages] == ["First", "Second"]
        assert [m.sender_first_name for m in messages] == ["Boris", "Anna"]
        assert messages[0].is_read is False

    @pytest.mark.asyncio
    async def test_missing_conversation(self, chat_read):
        assert await chat_read.get_details(12345) is None
        assert await chat_read.get_message(12345) is None
