from mongoengine import DateTimeField, ObjectIdField, StringField

from app.models.base import BaseDocument


class PasswordResetToken(BaseDocument):
    user_id = ObjectIdField(required=True, null=False)
    token = StringField(required=True, null=False)
    expires_at = DateTimeField(required=True, null=False)

    meta = {
        "collection": "password_reset_tokens",
        "indexes": [
            {"fields": ["user_id"]},
            {"fields": ["token"], "unique": True},
            {"fields": ["expires_at"]},
        ],
    }
