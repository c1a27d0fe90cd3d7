from mongoengine import EmailField, StringField, DateTimeField, EmbeddedDocumentField

from app.models.base import TimestampedDocument, BaseEmbeddedDocument, utcnow
from app.utils.base import Role


class Photo(BaseEmbeddedDocument):
    """Embedded: uploaded profile picture metadata."""
    filename = StringField(required=True, null=False, default="")
    file_path = StringField(required=True, null=False, default="")
    public_id = StringField(required=True, null=False, default="")
    uploaded_at = DateTimeField(default=utcnow, null=False)


class User(TimestampedDocument):
    """User document.

    Fields:
    - username (str, unique): Public handle
    - email (str, unique): Login identifier
    - password (str, hashed): Bcrypt-hashed password
    - role (str): admin/user
    - profile_picture (Photo|None), bio (str|None)
    """
    username = StringField(required=True, null=False, min_length=3, max_length=50)
    email = EmailField(required=True, null=False)
    password = StringField(required=True, null=False)
    role = StringField(required=True, null=False, default=Role.USER.value, choices=Role.choices())
    profile_picture = EmbeddedDocumentField(Photo, required=False, null=True)
    bio = StringField(required=False, null=True)

    meta = {
        "collection": "users",
        "indexes": [
            {"fields": ["username"], "unique": True},
            {"fields": ["email"], "unique": True},
            {"fields": ["role"]},
        ],
    }
