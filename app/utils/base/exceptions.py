from typing import Any


class BootstrapError(Exception):
    """Base class for every failure surfaced by the schema bootstrap."""


class ConnectionFailure(BootstrapError):
    """The target database could not be reached."""


class CollectionCreationFailure(BootstrapError):
    def __init__(self, collection: str, reason: str):
        self.collection = collection
        super().__init__(f"Could not create collection '{collection}': {reason}")


class IndexConflict(BootstrapError):
    """An existing index is incompatible with the declared one.

    Carries the collection and the declared keys/options so the operator can
    drop or rename the offending index and re-run.
    """

    def __init__(self, collection: str, keys: list[tuple[str, Any]], options: dict, reason: str):
        self.collection = collection
        self.keys = keys
        self.options = options
        spec = ", ".join(f"{field}: {direction}" for field, direction in keys)
        super().__init__(f"Index {{{spec}}} {options or ''} on '{collection}' conflicts: {reason}")


class UniqueConstraintViolation(BootstrapError):
    def __init__(self, collection: str, key: dict, reason: str):
        self.collection = collection
        self.key = key
        super().__init__(f"Duplicate value for {key} in '{collection}': {reason}")
