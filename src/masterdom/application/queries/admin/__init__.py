from masterdom.application.queries.admin.admin_stats_query import AdminStatsQuery
from masterdom.application.queries.admin.list_admin_offers_query import (
    ListAdminOffersQuery,
)
from masterdom.application.queries.admin.list_users_query import ListUsersQuery

__all__ = ["AdminStatsQuery", "ListAdminOffersQuery", "ListUsersQuery"]
