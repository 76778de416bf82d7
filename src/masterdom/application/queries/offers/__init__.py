from masterdom.application.queries.offers.list_offer_applications_query import (
    ListOfferApplicationsQuery,
)
from masterdom.application.queries.offers.list_offers_query import ListOffersQuery

__all__ = ["ListOfferApplicationsQuery", "ListOffersQuery"]
