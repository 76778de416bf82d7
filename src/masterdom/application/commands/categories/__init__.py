from masterdom.application.commands.categories.create_category_command import (
    CreateCategoryCommand,
)
from masterdom.application.commands.categories.delete_category_command import (
    DeleteCategoryCommand,
)
from masterdom.application.commands.categories.update_category_command import (
    UpdateCategoryCommand,
)

__all__ = [
    "CreateCategoryCommand",
    "DeleteCategoryCommand",
    "UpdateCategoryCommand",
]
