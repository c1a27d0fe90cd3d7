from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from app.connections import get_database, ping
from app.utils.base import ConnectionFailure


router = APIRouter()


@router.get("")
def health(database: Database = Depends(get_database)) -> dict:
    """PUBLIC: Ping MongoDB and list the collections present."""
    try:
        ping(database)
    except ConnectionFailure as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return {
        "status": "ok",
        "database": database.name,
        "collections": sorted(database.list_collection_names()),
    }
