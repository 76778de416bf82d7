"""Offers router: public catalog, publishing and responses."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query, status

from masterdom.application.commands.offers import (
    CreateOfferCommand,
    RespondToOfferCommand,
)
from masterdom.application.dtos.offers import OfferFilter
from masterdom.application.queries.offers import (
    ListOfferApplicationsQuery,
    ListOffersQuery,
)
from masterdom.domain.offer import OfferType
from masterdom.presentation.api.dependencies import PublicRepoFactory, RepoFactory
from masterdom.presentation.api.schemas.common import CreatedResponse
from masterdom.presentation.api.schemas.offers import (
    ApplicationResponse,
    OfferCreateRequest,
    OfferResponse,
    RespondRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

OfferTypeFilter = Annotated[
    Optional[OfferType],
    Query(alias="type", description="service_offer or request_for_service"),
]
SearchFilter = Annotated[
    Optional[str],
    Query(description="Case-insensitive match on title or description"),
]
CategoryFilter = Annotated[Optional[int], Query(description="Category id")]


@router.get(
    "",
    summary="List active offers",
    responses={200: {"description": "Active offers, newest first"}},
)
async def list_offers(
    factory: PublicRepoFactory,
    offer_type: OfferTypeFilter = None,
    search: SearchFilter = None,
    category_id: CategoryFilter = None,
) -> list[OfferResponse]:
    """
    List active offers.

    Filters combine with AND. With a valid bearer token each row tells
    whether the caller already responded.
    """
    query = ListOffersQuery.from_factory(factory)
    items = await query.execute(
        OfferFilter(offer_type=offer_type, search=search, category_id=category_id),
    )
    return [OfferResponse.model_validate(item) for item in items]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Publish an offer",
    responses={
        201: {"description": "Offer created"},
        404: {"description": "Category not found"},
    },
)
async def create_offer(
    request: OfferCreateRequest,
    factory: RepoFactory,
) -> CreatedResponse:
    command = CreateOfferCommand.from_factory(factory)
    offer = await command.execute(
        offer_type=request.offer_type.value,
        title=request.title,
        description=request.description,
        category_id=request.category_id,
    )
    await factory.session.commit()

    return CreatedResponse(id=offer.id)


@router.post(
    "/{offer_id}/respond",
    status_code=status.HTTP_201_CREATED,
    summary="Respond to an offer",
    responses={
        201: {"description": "Response recorded"},
        404: {"description": "Offer not found"},
        409: {"description": "Already responded"},
    },
)
async def respond_to_offer(
    offer_id: int,
    factory: RepoFactory,
    request: Optional[RespondRequest] = None,
) -> CreatedResponse:
    command = RespondToOfferCommand.from_factory(factory)
    response = await command.execute(
        offer_id,
        message=request.message if request else "",
    )
    await factory.session.commit()

    return CreatedResponse(id=response.id)


@router.get(
    "/{offer_id}/applications",
    summary="List responses to an offer",
    responses={
        200: {"description": "Responses, newest first"},
        403: {"description": "Caller is not the offer's author"},
        404: {"description": "Offer not found"},
    },
)
async def list_applications(
    offer_id: int,
    factory: RepoFactory,
) -> list[ApplicationResponse]:
    query = ListOfferApplicationsQuery.from_factory(factory)
    applications = await query.execute(offer_id)
    return [ApplicationResponse.model_validate(a) for a in applications]
