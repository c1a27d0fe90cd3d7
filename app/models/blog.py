from bson.objectid import ObjectId
from mongoengine import (
    DateTimeField,
    EmbeddedDocumentField,
    IntField,
    ListField,
    ObjectIdField,
    StringField,
)

from app.models.base import TimestampedDocument, BaseEmbeddedDocument, utcnow


class Comment(BaseEmbeddedDocument):
    """Embedded: a comment on a blog, with its own ``_id``."""
    id = ObjectIdField(db_field="_id", required=True, default=ObjectId)
    author_id = ObjectIdField(required=True, null=False)
    author_username = StringField(required=True, null=False)
    content = StringField(required=True, null=False, min_length=1)
    created_at = DateTimeField(default=utcnow, null=False)
    updated_at = DateTimeField(default=utcnow, null=False)


class Blog(TimestampedDocument):
    """Blog post.

    Fields:
    - title/content (str)
    - author_id (ObjectId of a User), author_username (denormalized copy)
    - tags (list[str]): tag names, not ids
    - view_count/like_count/comment_count (int >= 0)
    - likes/dislikes (list[str]): user ids
    - comments (list[Comment])
    """
    title = StringField(required=True, null=False, min_length=1, max_length=200)
    content = StringField(required=True, null=False, min_length=1)
    author_id = ObjectIdField(required=True, null=False)
    author_username = StringField(required=True, null=False)
    tags = ListField(StringField(), null=False, default=list)

    view_count = IntField(required=True, null=False, default=0, min_value=0)
    like_count = IntField(required=True, null=False, default=0, min_value=0)
    comment_count = IntField(required=True, null=False, default=0, min_value=0)

    likes = ListField(StringField(), null=False, default=list)
    dislikes = ListField(StringField(), null=False, default=list)
    comments = ListField(EmbeddedDocumentField(Comment), null=False, default=list)

    meta = {
        "collection": "blogs",
        "indexes": [
            {"fields": ["author_id"]},
            {"fields": ["author_username"]},
            {"fields": ["tags"]},
            {"fields": ["-created_at"]},
            {"fields": ["-view_count"]},
            {"fields": ["$title", "$content"]},
        ],
    }
