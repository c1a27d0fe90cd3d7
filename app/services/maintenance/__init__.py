from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pymongo.database import Database

from app.models import PasswordResetToken, Session
from app.models.base import utcnow


logger = logging.getLogger(__name__)


EXPIRING = (Session, PasswordResetToken)


def purge_expired(database: Database, now: datetime | None = None) -> dict[str, int]:
    """Delete sessions and reset tokens whose ``expires_at`` has passed."""
    now = now or utcnow()
    deleted: dict[str, int] = {}
    for model in EXPIRING:
        name = model._get_collection_name()
        result = database[name].delete_many({"expires_at": {"$lt": now}})
        deleted[name] = int(result.deleted_count)
        logger.info("Purged %d expired document(s) from %s", deleted[name], name)
    return deleted


def expired_sessions_plan(database: Database, now: datetime | None = None) -> dict[str, Any]:
    """Return the winning query plan for the expired-session range scan."""
    now = now or utcnow()
    explained = database[Session._get_collection_name()].find({"expires_at": {"$lt": now}}).explain()
    return explained["queryPlanner"]["winningPlan"]


def uses_index(plan: dict[str, Any], index_name: str) -> bool:
    """True if any stage of ``plan`` is an IXSCAN over ``index_name``."""
    if plan.get("stage") == "IXSCAN" and plan.get("indexName") == index_name:
        return True
    # Newer servers wrap the classic plan under queryPlan
    children = [plan.get("inputStage"), plan.get("queryPlan"), *plan.get("inputStages", [])]
    return any(uses_index(child, index_name) for child in children if child)
