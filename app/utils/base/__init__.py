from app.utils.base.enums import BaseEnum, ReactionType, Role
from app.utils.base.exceptions import (
    BootstrapError,
    CollectionCreationFailure,
    ConnectionFailure,
    IndexConflict,
    UniqueConstraintViolation,
)

__all__ = [
    "BaseEnum",
    "ReactionType",
    "Role",
    "BootstrapError",
    "CollectionCreationFailure",
    "ConnectionFailure",
    "IndexConflict",
    "UniqueConstraintViolation",
]
