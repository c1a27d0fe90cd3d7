import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import certifi
from fastapi import FastAPI
from mongoengine import connect, disconnect
from mongoengine.connection import get_db
from pymongo import errors as mongo_errors
from pymongo.database import Database

from app.utils.base import ConnectionFailure
from app.utils.config import settings


logger = logging.getLogger(__name__)


def init_mongo(host: str | None = None, db: str | None = None, **kwargs) -> None:
    """Register the default mongoengine connection.

    Extra keyword arguments go straight to the client (tests pass
    ``mongo_client_class`` here).
    """
    options = {
        "tz_aware": True,
        "serverSelectionTimeoutMS": settings.mongo_timeout_ms,
    }
    if settings.mongo_tls:
        options["tlsCAFile"] = certifi.where()
    options.update(kwargs)
    name = db or settings.mongo_db
    # The URI path must name the same database or it wins over ``db``
    connect(db=name, host=host or settings.mongo_uri_for(name), alias="default", **options)


def close_mongo() -> None:
    disconnect(alias="default")


def get_database() -> Database:
    return get_db(alias="default")


def ping(database: Database) -> None:
    """Round-trip to the server; raise ConnectionFailure if it cannot be reached."""
    try:
        database.command("ping")
    except mongo_errors.ConnectionFailure as exc:
        raise ConnectionFailure(f"Cannot reach MongoDB for database '{database.name}': {exc}") from exc
    logger.debug("Pinged database %s", database.name)


@asynccontextmanager
async def mongo_lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_mongo()
    try:
        yield
    finally:
        close_mongo()
