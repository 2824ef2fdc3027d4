"""Donor dashboard endpoints."""

import typing as t

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.aid_request import AidRequestResponse
from app.schemas.assist import SituationReport
from app.schemas.statistics import DashboardStats, IgnoredKeywordsResponse
from app.services import ExtractionService, KeywordService, RequestService
from app.services.extraction_service import get_extraction_service

ROUTER = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@ROUTER.get("/stats", response_model=DashboardStats)
async def get_statistics(
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> DashboardStats:
    """Get the needs statistics over every request.

    Generic keywords flagged by the last classification are left out of the
    keyword ranking.

    Args:
        db (AsyncSession): The database session.

    Returns:
        DashboardStats: The dashboard snapshot.
    """
    return await RequestService(db).get_dashboard_stats()


@ROUTER.get("/feed", response_model=t.List[AidRequestResponse])
async def get_live_feed(
    db: t.Annotated[AsyncSession, Depends(get_db)],
    location: str | None = Query(
        None, description="Only requests from this exact location"
    ),
) -> t.List[AidRequestResponse]:
    """List requests that still need supplies, newest first.

    Args:
        db (AsyncSession): The database session.
        location (str | None): Optional exact location filter.

    Returns:
        List[AidRequestResponse]: Open requests.
    """
    return await RequestService(db).list_active(location=location)


@ROUTER.post("/report", response_model=SituationReport)
async def generate_report(
    db: t.Annotated[AsyncSession, Depends(get_db)],
    extraction: t.Annotated[
        ExtractionService, Depends(get_extraction_service)
    ],
) -> SituationReport:
    """Generate an AI situation report for donors.

    Args:
        db (AsyncSession): The database session.
        extraction (ExtractionService): The AI assistance service.

    Returns:
        SituationReport: The report, or a fallback message.
    """
    requests: t.List[AidRequestResponse] = await RequestService(db).list_all()
    return await extraction.generate_situation_report(requests)


@ROUTER.get("/ignored-keywords", response_model=IgnoredKeywordsResponse)
async def get_ignored_keywords(
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> IgnoredKeywordsResponse:
    """Get the keywords currently left out of the keyword ranking.

    Args:
        db (AsyncSession): The database session.

    Returns:
        IgnoredKeywordsResponse: The stored ignored keywords.
    """
    keywords: t.List[str] = await KeywordService(db).get_ignored_keywords()
    return IgnoredKeywordsResponse(keywords=keywords, total=len(keywords))


@ROUTER.post(
    "/ignored-keywords/refresh", response_model=IgnoredKeywordsResponse
)
async def refresh_ignored_keywords(
    db: t.Annotated[AsyncSession, Depends(get_db)],
    extraction: t.Annotated[
        ExtractionService, Depends(get_extraction_service)
    ],
) -> IgnoredKeywordsResponse:
    """Reclassify the keyword vocabulary now.

    Args:
        db (AsyncSession): The database session.
        extraction (ExtractionService): The AI assistance service.

    Returns:
        IgnoredKeywordsResponse: The newly stored ignored keywords.
    """
    if not extraction.enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI assistance is not configured",
        )

    keywords: t.List[str] = await KeywordService(
        db
    ).refresh_ignored_keywords(extraction)
    return IgnoredKeywordsResponse(keywords=keywords, total=len(keywords))
