"""Query layer. Read-only operations for retrieving data."""

from masterdom.application.queries.admin import (
    AdminStatsQuery,
    ListAdminOffersQuery,
    ListUsersQuery,
)
from masterdom.application.queries.categories import ListCategoriesQuery
from masterdom.application.queries.chat import (
    GetConversationDetailsQuery,
    ListConversationsQuery,
    ListMessagesQuery,
)
from masterdom.application.queries.offers import (
    ListOfferApplicationsQuery,
    ListOffersQuery,
)
from masterdom.application.queries.user import GetUserDetailQuery

__all__ = [
    "AdminStatsQuery",
    "GetConversationDetailsQuery",
    "GetUserDetailQuery",
    "ListAdminOffersQuery",
    "ListCategoriesQuery",
    "ListConversationsQuery",
    "ListMessagesQuery",
    "ListOfferApplicationsQuery",
    "ListOffersQuery",
    "ListUsersQuery",
]
