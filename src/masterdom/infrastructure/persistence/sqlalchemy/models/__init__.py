"""SQLAlchemy models for persistence layer."""

from masterdom.infrastructure.persistence.sqlalchemy.models.base import Base
from masterdom.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.chat import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.offer import (
    OfferModel,
    OfferResponseModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.user import (
    ProfileModel,
    UserModel,
)

__all__ = [
    "Base",
    "CategoryModel",
    "ConversationModel",
    "ConversationParticipantModel",
    "MessageModel",
    "OfferModel",
    "OfferResponseModel",
    "ProfileModel",
    "UserModel",
]
