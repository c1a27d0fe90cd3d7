from functools import partial
from unittest.mock import patch

import mongomock

from app.bootstrap import run
from app.connections import close_mongo, get_database, init_mongo
from app.utils.config import settings


class TestInitMongo:
    def test_uri_names_the_requested_database(self):
        assert settings.mongo_uri_for("other_db").split("?")[0].endswith("/other_db")
        assert settings.mongo_uri.split("?")[0].endswith(f"/{settings.mongo_db}")

    def test_db_argument_selects_database(self):
        init_mongo(db="other_db", mongo_client_class=mongomock.MongoClient)
        try:
            assert get_database().name == "other_db"
        finally:
            close_mongo()

    def test_defaults_to_configured_database(self):
        init_mongo(mongo_client_class=mongomock.MongoClient)
        try:
            assert get_database().name == settings.mongo_db
        finally:
            close_mongo()


class TestCommandLineDatabase:
    def test_database_flag_targets_that_database(self):
        connect = partial(init_mongo, mongo_client_class=mongomock.MongoClient)
        with patch.object(run, "init_mongo", side_effect=connect), patch.object(run, "close_mongo"):
            status = run.main(["--seed", "--database", "staging_blog_db"])
        try:
            database = get_database()
            assert status == 0
            assert database.name == "staging_blog_db"
            assert database["users"].count_documents({"username": "admin"}) == 1
        finally:
            close_mongo()
