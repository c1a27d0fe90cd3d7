from enum import Enum


class BaseEnum(Enum):
    @classmethod
    def choices(cls):
        return [(item.value, item.name) for item in cls]


class Role(BaseEnum):
    ADMIN = "admin"
    USER = "user"


class ReactionType(BaseEnum):
    LIKE = "like"
    DISLIKE = "dislike"
