from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field
from pymongo import errors as mongo_errors
from pymongo.database import Database

from app.connections import ping
from app.models import SCHEMA
from app.models.base import BaseDocument
from app.services.fixtures import SeedReport, seed_fixtures
from app.utils.base import CollectionCreationFailure, ConnectionFailure, IndexConflict


logger = logging.getLogger(__name__)


class InitReport(BaseModel):
    """What a schema initialization run did to the target database."""
    database: str
    created_collections: list[str] = Field(default_factory=list)
    existing_collections: list[str] = Field(default_factory=list)
    indexes: dict[str, list[str]] = Field(default_factory=dict)
    seed: SeedReport | None = None

    @property
    def collections(self) -> list[str]:
        return self.created_collections + self.existing_collections


def index_specs(model: type[BaseDocument]) -> list[tuple[list[tuple[str, Any]], dict[str, Any]]]:
    """Return ``(keys, options)`` pairs for every index a model declares."""
    specs = []
    for spec in model._meta.get("index_specs", []):
        keys = list(spec["fields"])
        # Falsy flags (sparse=False etc.) are server defaults; leave them out
        options = {k: v for k, v in spec.items() if k != "fields" and v}
        specs.append((keys, options))
    return specs


def ensure_collection(database: Database, name: str) -> bool:
    """Create ``name`` if missing. Returns True when this call created it."""
    try:
        if name in database.list_collection_names():
            return False
        database.create_collection(name)
    except mongo_errors.CollectionInvalid:
        # Another initializer got there first
        return False
    except mongo_errors.ConnectionFailure as exc:
        raise ConnectionFailure(f"Lost connection while creating '{name}': {exc}") from exc
    except mongo_errors.PyMongoError as exc:
        raise CollectionCreationFailure(name, str(exc)) from exc
    return True


def ensure_indexes(database: Database, model: type[BaseDocument]) -> list[str]:
    """Create every declared index on the model's collection.

    An identical existing index is left alone by the server. A conflicting
    one raises IndexConflict and stops here; earlier indexes stay in place.
    """
    name = model._get_collection_name()
    collection = database[name]
    created: list[str] = []
    for keys, options in index_specs(model):
        try:
            created.append(collection.create_index(keys, **options))
        except mongo_errors.ConnectionFailure as exc:
            raise ConnectionFailure(f"Lost connection while indexing '{name}': {exc}") from exc
        except mongo_errors.OperationFailure as exc:
            raise IndexConflict(name, keys, options, str(exc)) from exc
    return created


def describe_schema(database: Database) -> dict[str, dict[str, Any]]:
    """Map each declared collection to its ``index_information()``."""
    existing = set(database.list_collection_names())
    return {
        model._get_collection_name(): database[model._get_collection_name()].index_information()
        for model in SCHEMA
        if model._get_collection_name() in existing
    }


def initialize(
    database: Database,
    seed: bool = False,
    admin_password_hash: str | None = None,
) -> InitReport:
    """Bring ``database`` up to the declared schema.

    Safe to re-run: collections and identical indexes that already exist are
    kept. Fixtures are only written when ``seed`` is set, and the seeder
    skips rows that are already there.
    """
    ping(database)
    logger.info("Setting up database %s", database.name)

    report = InitReport(database=database.name)
    for model in SCHEMA:
        name = model._get_collection_name()
        if ensure_collection(database, name):
            report.created_collections.append(name)
        else:
            report.existing_collections.append(name)
        report.indexes[name] = ensure_indexes(database, model)
        logger.info("%s collection ready with indexes: %s", name, ", ".join(report.indexes[name]))

    if seed:
        logger.info("Inserting sample data")
        report.seed = seed_fixtures(database, admin_password_hash=admin_password_hash)

    return report
