import pytest

from app.services.fixtures import TAG_NAMES, WELCOME_TITLE, seed_fixtures
from app.services.schema import initialize
from app.utils.base import UniqueConstraintViolation

from tests.conftest import TEST_PASSWORD_HASH


@pytest.fixture(autouse=True)
def _schema(database):
    initialize(database)


class TestSeedFixtures:
    def test_seeds_admin_blog_and_tags(self, database):
        report = seed_fixtures(database)

        assert report.users_inserted == 1
        assert report.blogs_inserted == 1
        assert report.tags_inserted == 8
        assert not report.skipped

        users = list(database["users"].find())
        assert len(users) == 1
        admin = users[0]
        assert admin["username"] == "admin"
        assert admin["email"] == "admin@example.com"
        assert admin["role"] == "admin"
        assert admin["bio"] == "System Administrator"
        assert admin["password"] == TEST_PASSWORD_HASH
        assert set(admin["profile_picture"]) == {"filename", "file_path", "public_id", "uploaded_at"}
        assert str(admin["_id"]) == report.admin_id

    def test_welcome_blog_references_admin(self, database):
        report = seed_fixtures(database)

        blog = database["blogs"].find_one({"title": WELCOME_TITLE})
        assert str(blog["author_id"]) == report.admin_id
        assert blog["author_username"] == "admin"
        assert blog["tags"] == ["welcome", "sample"]
        assert blog["view_count"] == 0
        assert blog["like_count"] == 0
        assert blog["comment_count"] == 0
        assert blog["likes"] == [] and blog["dislikes"] == [] and blog["comments"] == []

    def test_tag_names(self, database):
        seed_fixtures(database)
        assert sorted(doc["name"] for doc in database["tags"].find()) == sorted(TAG_NAMES)
        assert database["tags"].count_documents({}) == 8

    def test_reseeding_is_skipped(self, database):
        first = seed_fixtures(database)
        second = seed_fixtures(database)

        assert second.skipped
        assert second.admin_id == first.admin_id
        assert database["users"].count_documents({"username": "admin"}) == 1
        assert database["blogs"].count_documents({}) == 1
        assert database["tags"].count_documents({}) == 8

    def test_fills_in_missing_tags_only(self, database):
        database["tags"].insert_many([{"name": "golang"}, {"name": "api"}])

        report = seed_fixtures(database)

        assert report.tags_inserted == 6
        assert database["tags"].count_documents({}) == 8

    def test_email_collision_surfaces_unique_violation(self, database):
        # Someone else already owns the admin email under another username
        database["users"].insert_one({"username": "root", "email": "admin@example.com"})

        with pytest.raises(UniqueConstraintViolation) as info:
            seed_fixtures(database)

        assert info.value.collection == "users"
        assert info.value.key == {"email": "admin@example.com"}
        assert database["users"].count_documents({}) == 1

    def test_password_hash_argument_wins(self, database):
        seed_fixtures(database, admin_password_hash="$2b$12$explicit")
        assert database["users"].find_one({"username": "admin"})["password"] == "$2b$12$explicit"


class TestSeedReport:
    def test_skipped_is_serialized(self, database):
        first = seed_fixtures(database).model_dump()
        second = seed_fixtures(database).model_dump()

        assert first["skipped"] is False
        assert second["skipped"] is True

    def test_init_report_carries_seed_outcome(self, database):
        dumped = initialize(database, seed=True).model_dump()
        assert dumped["seed"]["skipped"] is False
        assert dumped["seed"]["tags_inserted"] == 8
