from app.connections.mongo import close_mongo, get_database, init_mongo, mongo_lifespan, ping

__all__ = ["close_mongo", "get_database", "init_mongo", "mongo_lifespan", "ping"]
