from mongoengine import ObjectIdField, StringField

from app.models.base import TimestampedDocument
from app.utils.base import ReactionType


class Reaction(TimestampedDocument):
    """A user's like/dislike on a blog. Unique per (blog_id, user_id)."""
    blog_id = ObjectIdField(required=True, null=False)
    user_id = ObjectIdField(required=True, null=False)
    reaction_type = StringField(required=True, null=False, choices=ReactionType.choices())

    meta = {
        "collection": "reactions",
        "indexes": [
            {"fields": ["blog_id", "user_id"], "unique": True},
            {"fields": ["blog_id", "reaction_type"]},
            {"fields": ["user_id"]},
        ],
    }
