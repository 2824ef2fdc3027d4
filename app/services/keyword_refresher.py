"""Background task reclassifying generic keywords for the dashboard."""

import logging
import typing as t

from app.core.config import SETTINGS
from app.core.database import ASYNC_SESSION_MAKER
from app.services.extraction_service import ExtractionService
from app.services.keyword_service import KeywordService

LOGGER = logging.getLogger(__name__)


async def refresh_ignored_keywords_task() -> None:
    """Background task to refresh the stored ignored keyword list."""
    if not SETTINGS.ai_enabled:
        LOGGER.debug("AI assistance not configured, skipping keyword refresh")
        return

    LOGGER.info("Running generic keyword classification...")

    try:
        async with ASYNC_SESSION_MAKER() as session:
            stored: t.List[str] = await KeywordService(
                session
            ).refresh_ignored_keywords(ExtractionService())
            await session.commit()
        LOGGER.info("Ignored keywords now: %s", ", ".join(stored) or "none")

    except Exception:  # pylint: disable=broad-except
        LOGGER.exception("Error in keyword refresh task")
