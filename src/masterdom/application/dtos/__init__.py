"""Application DTOs (read models)."""

from masterdom.application.dtos.admin import AdminStatsDTO
from masterdom.application.dtos.categories import CategoryDTO
from masterdom.application.dtos.chat import (
    ConversationDetailsDTO,
    ConversationPreviewDTO,
    MessageDTO,
    ParticipantProfileDTO,
)
from masterdom.application.dtos.offers import (
    AdminOfferDTO,
    OfferApplicationDTO,
    OfferFilter,
    OfferListItemDTO,
)
from masterdom.application.dtos.users import UserDetailDTO

__all__ = [
    "AdminOfferDTO",
    "AdminStatsDTO",
    "CategoryDTO",
    "ConversationDetailsDTO",
    "ConversationPreviewDTO",
    "MessageDTO",
    "OfferApplicationDTO",
    "OfferFilter",
    "OfferListItemDTO",
    "ParticipantProfileDTO",
    "UserDetailDTO",
]
