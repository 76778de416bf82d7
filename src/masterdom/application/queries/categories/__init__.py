from masterdom.application.queries.categories.list_categories_query import (
    ListCategoriesQuery,
)

__all__ = ["ListCategoriesQuery"]
