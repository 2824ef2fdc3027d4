"""FastAPI application entry point."""

import logging
import typing as t
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from app.core.config import SETTINGS
from app.core.database import ASYNC_SESSION_MAKER, close_db, init_db
from app.core.globals import OPENAPI_TAGS
from app.routers import api_router
from app.services.init_service import initialize_database
from app.services.keyword_refresher import refresh_ignored_keywords_task

logging.basicConfig(
    level=logging.DEBUG if SETTINGS.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
LOGGER: logging.Logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> t.AsyncGenerator[None, None]:
    """Application lifespan events.

    args:
        _ (FastAPI): The FastAPI application instance.
    """
    LOGGER.info("Starting %s API...", SETTINGS.app_name)
    await init_db()
    LOGGER.info("Database tables initialized")

    async with ASYNC_SESSION_MAKER() as session:
        await initialize_database(session)

    scheduler: AsyncIOScheduler = AsyncIOScheduler()
    scheduler.add_job(
        refresh_ignored_keywords_task,
        trigger=IntervalTrigger(
            minutes=SETTINGS.keyword_refresh_interval_minutes
        ),
        id="keyword_refresh",
        name="Classify generic keywords",
        replace_existing=True,
    )
    scheduler.start()
    LOGGER.info(
        "Keyword classification scheduled every %d minutes",
        SETTINGS.keyword_refresh_interval_minutes,
    )

    await refresh_ignored_keywords_task()

    yield

    LOGGER.info("Shutting down %s...", SETTINGS.app_name)
    scheduler.shutdown(wait=False)
    await close_db()
    LOGGER.info("Cleanup complete")


APPLICATION: FastAPI = FastAPI(
    title=SETTINGS.app_name,
    description=(
        "AidConnect - Coordinate disaster-relief aid requests and donor"
        " priorities"
    ),
    version=SETTINGS.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=OPENAPI_TAGS,
)

APPLICATION.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

APPLICATION.include_router(api_router)


@APPLICATION.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to the API documentation.

    Returns:
        RedirectResponse: A redirect response to the docs page.
    """
    return RedirectResponse(url="/docs", status_code=303)


@APPLICATION.get("/health", tags=["Health"])
async def health_check() -> t.Dict[str, str]:
    """Health check endpoint for monitoring.

    Returns:
        t.Dict[str, str]: A dictionary indicating the health status.
    """
    return {"status": "healthy"}
