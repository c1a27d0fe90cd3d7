from mongoengine import StringField

from app.models.base import BaseDocument


class Tag(BaseDocument):
    """Tag name; blogs reference tags by value."""
    name = StringField(required=True, null=False, min_length=1, max_length=50)

    meta = {
        "collection": "tags",
        "indexes": [
            {"fields": ["name"], "unique": True},
        ],
    }
