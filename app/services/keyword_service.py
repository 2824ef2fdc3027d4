"""Ignored keyword service - the stored verdict of the keyword classifier."""

import logging
import typing as t

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import AidRequest, IgnoredKeyword
from app.services.aggregator import collect_vocabulary, normalize_keyword
from app.services.extraction_service import ExtractionService
from app.utils.dates import now_ms

LOGGER: logging.Logger = logging.getLogger(__name__)


class KeywordService:
    """Service class for the ignored keyword list."""

    db: AsyncSession

    def __init__(self, db: AsyncSession) -> None:
        """Initialize KeywordService.

        Args:
            db (AsyncSession): The database session.
        """
        self.db = db

    async def get_ignored_keywords(self) -> t.List[str]:
        """Get the stored ignored keywords.

        Returns:
            List[str]: Normalized keywords, alphabetically.
        """
        return list(
            (
                await self.db.execute(
                    select(IgnoredKeyword.keyword).order_by(
                        IgnoredKeyword.keyword
                    )
                )
            )
            .scalars()
            .all()
        )

    async def replace_ignored_keywords(
        self, keywords: t.Iterable[str]
    ) -> t.List[str]:
        """Replace the stored list with a new one.

        Args:
            keywords (Iterable[str]): The new ignored keywords.

        Returns:
            List[str]: The stored keywords, alphabetically.
        """
        normalized: t.Set[str] = {
            normalize_keyword(keyword) for keyword in keywords
        }
        normalized.discard("")

        await self.db.execute(delete(IgnoredKeyword))
        flagged_at: int = now_ms()
        self.db.add_all(
            IgnoredKeyword(keyword=keyword, flagged_at=flagged_at)
            for keyword in normalized
        )
        await self.db.flush()
        return sorted(normalized)

    async def get_vocabulary(self) -> t.List[str]:
        """Distinct normalized keywords across every stored item.

        Returns:
            List[str]: The vocabulary in first-encounter order.
        """
        requests: t.Sequence[AidRequest] = (
            (
                await self.db.execute(
                    select(AidRequest).order_by(
                        AidRequest.created_at, AidRequest.id
                    )
                )
            )
            .scalars()
            .all()
        )
        return collect_vocabulary(requests)

    async def refresh_ignored_keywords(
        self, extraction: ExtractionService
    ) -> t.List[str]:
        """Reclassify the current vocabulary and store the verdict.

        A failing classifier yields an empty verdict, which disables
        filtering until the next successful refresh.

        Args:
            extraction (ExtractionService): The classifier.

        Returns:
            List[str]: The newly stored ignored keywords.
        """
        vocabulary: t.List[str] = await self.get_vocabulary()
        flagged: t.List[str] = await extraction.classify_generic_keywords(
            vocabulary
        )
        stored: t.List[str] = await self.replace_ignored_keywords(flagged)
        LOGGER.info(
            "Flagged %d of %d keywords as generic",
            len(stored),
            len(vocabulary),
        )
        return stored
