from masterdom.infrastructure.persistence.sqlalchemy.models.user.profile_model import (
    ProfileModel,
)
from masterdom.infrastructure.persistence.sqlalchemy.models.user.user_model import (
    UserModel,
)

__all__ = ["ProfileModel", "UserModel"]
