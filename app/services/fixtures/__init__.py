from __future__ import annotations

import logging
from typing import Any

from bson.objectid import ObjectId
from pydantic import BaseModel, computed_field
from pymongo import errors as mongo_errors
from pymongo.collection import Collection
from pymongo.database import Database

from app.models import Blog, Photo, Tag, User
from app.models.base import BaseDocument, utcnow
from app.services.auth import hash_password
from app.utils.base import Role, UniqueConstraintViolation
from app.utils.config import settings


logger = logging.getLogger(__name__)


WELCOME_TITLE = "Welcome to Blog API"
WELCOME_CONTENT = "This is a sample blog post to test the API."
WELCOME_TAGS = ["welcome", "sample"]

TAG_NAMES = [
    "technology",
    "programming",
    "golang",
    "web-development",
    "database",
    "api",
    "tutorial",
    "best-practices",
]


class SeedReport(BaseModel):
    admin_id: str
    users_inserted: int = 0
    blogs_inserted: int = 0
    tags_inserted: int = 0

    @computed_field
    @property
    def skipped(self) -> bool:
        return not (self.users_inserted or self.blogs_inserted or self.tags_inserted)


def _colliding_key(collection: Collection, data: dict[str, Any], fallback: dict[str, Any]) -> dict[str, Any]:
    """Find which unique key an insert collided on.

    The server reports it in ``keyValue``; otherwise look for an existing
    document sharing the values of one of the unique indexes.
    """
    for info in collection.index_information().values():
        fields = [field for field, _ in info["key"]]
        if not info.get("unique") or fields == ["_id"]:
            continue
        candidate = {field: data.get(field) for field in fields}
        if collection.find_one(candidate, {"_id": 1}):
            return candidate
    return fallback


def _insert(database: Database, document: BaseDocument, key: dict[str, Any]) -> ObjectId:
    """Validate and insert a document, translating duplicate keys."""
    document.validate()
    name = document._get_collection_name()
    data = document.to_mongo().to_dict()
    try:
        result = database[name].insert_one(data)
    except mongo_errors.DuplicateKeyError as exc:
        collided = (exc.details or {}).get("keyValue") or _colliding_key(database[name], data, key)
        raise UniqueConstraintViolation(name, collided, str(exc)) from exc
    return result.inserted_id


def _ensure_admin(database: Database, password_hash: str | None) -> tuple[ObjectId, bool]:
    username = settings.seed_admin_username
    existing = database[User._get_collection_name()].find_one({"username": username}, {"_id": 1})
    if existing:
        return existing["_id"], False

    now = utcnow()
    user = User(
        username=username,
        email=settings.seed_admin_email,
        password=password_hash or settings.seed_admin_password_hash or hash_password(settings.seed_admin_password),
        role=Role.ADMIN.value,
        profile_picture=Photo(filename="", file_path="", public_id="", uploaded_at=now),
        bio="System Administrator",
        created_at=now,
        updated_at=now,
    )
    return _insert(database, user, {"username": username}), True


def _ensure_welcome_blog(database: Database, admin_id: ObjectId) -> bool:
    blogs = database[Blog._get_collection_name()]
    if blogs.find_one({"title": WELCOME_TITLE, "author_id": admin_id}, {"_id": 1}):
        return False

    now = utcnow()
    blog = Blog(
        title=WELCOME_TITLE,
        content=WELCOME_CONTENT,
        author_id=admin_id,
        author_username=settings.seed_admin_username,
        tags=WELCOME_TAGS,
        created_at=now,
        updated_at=now,
    )
    _insert(database, blog, {"title": WELCOME_TITLE, "author_id": str(admin_id)})
    return True


def _ensure_tags(database: Database) -> int:
    tags = database[Tag._get_collection_name()]
    present = {doc["name"] for doc in tags.find({"name": {"$in": TAG_NAMES}}, {"name": 1})}
    inserted = 0
    for name in TAG_NAMES:
        if name in present:
            continue
        _insert(database, Tag(name=name, created_at=utcnow()), {"name": name})
        inserted += 1
    return inserted


def seed_fixtures(database: Database, admin_password_hash: str | None = None) -> SeedReport:
    """Insert the bootstrap admin, welcome blog and tags, skipping what exists.

    A concurrent seeder can still win a race on a unique key; that surfaces as
    UniqueConstraintViolation rather than a duplicate row.
    """
    admin_id, user_created = _ensure_admin(database, admin_password_hash)
    blog_created = _ensure_welcome_blog(database, admin_id)
    tags_inserted = _ensure_tags(database)

    report = SeedReport(
        admin_id=str(admin_id),
        users_inserted=int(user_created),
        blogs_inserted=int(blog_created),
        tags_inserted=tags_inserted,
    )
    if report.skipped:
        logger.info("Sample data already present, nothing inserted")
    else:
        logger.info(
            "Sample data inserted: %d user(s), %d blog(s), %d tag(s)",
            report.users_inserted, report.blogs_inserted, report.tags_inserted,
        )
    return report
