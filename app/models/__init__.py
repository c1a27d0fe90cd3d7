from app.models.user import User, Photo
from app.models.blog import Blog, Comment
from app.models.session import Session
from app.models.reaction import Reaction
from app.models.password_reset_token import PasswordResetToken
from app.models.tag import Tag


# Creation order of the bootstrap
SCHEMA = (User, Blog, Session, Reaction, PasswordResetToken, Tag)

__all__ = [
    "SCHEMA",
    "Blog",
    "Comment",
    "PasswordResetToken",
    "Photo",
    "Reaction",
    "Session",
    "Tag",
    "User",
]
