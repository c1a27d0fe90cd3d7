from fastapi import FastAPI
from contextlib import AsyncExitStack

from app.bootstrap import schema_lifespan
from app.connections import mongo_lifespan
from app.api.health import router as health_router
from app.utils.config import settings


async def combined_lifespan(app: FastAPI):
    async with AsyncExitStack() as stack:
        await stack.enter_async_context(mongo_lifespan(app))
        await stack.enter_async_context(schema_lifespan(app))

        yield


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=combined_lifespan)


app.include_router(health_router, prefix="/api/health")
