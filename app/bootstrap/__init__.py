import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from app.connections import get_database
from app.services.schema import initialize
from app.utils.config import settings


logger = logging.getLogger(__name__)


@asynccontextmanager
async def schema_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the schema initializer as the app's startup migration step."""
    if settings.init_schema_on_startup:
        report = await run_in_threadpool(initialize, get_database(), seed=settings.seed_on_startup)
        app.state.schema_report = report
        logger.info("Schema ready: %s", ", ".join(report.collections))
    yield
