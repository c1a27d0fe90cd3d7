from mongoengine import DateTimeField, StringField

from app.models.base import BaseDocument


class Session(BaseDocument):
    """Login session, keyed by username.

    ``expires_at`` is what expiry cleanup scans on.
    """
    username = StringField(required=True, null=False)
    refresh_token = StringField(required=False, null=True)
    verification_token = StringField(required=False, null=True)
    password_reset_token = StringField(required=False, null=True)
    expires_at = DateTimeField(required=True, null=False)

    meta = {
        "collection": "sessions",
        "indexes": [
            {"fields": ["username"]},
            {"fields": ["refresh_token"]},
            {"fields": ["verification_token"]},
            {"fields": ["password_reset_token"]},
            {"fields": ["expires_at"]},
        ],
    }
