from masterdom.presentation.api.routers.admin import router as admin_router
from masterdom.presentation.api.routers.auth import router as auth_router
from masterdom.presentation.api.routers.categories import router as categories_router
from masterdom.presentation.api.routers.chats import router as chats_router
from masterdom.presentation.api.routers.offers import router as offers_router
from masterdom.presentation.api.routers.profile import router as profile_router

__all__ = [
    "admin_router",
    "auth_router",
    "categories_router",
    "chats_router",
    "offers_router",
    "profile_router",
]
