"""AI assistance endpoints for request submission."""

import typing as t

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas.assist import (
    KeywordSuggestionRequest,
    KeywordSuggestionResponse,
    RequestDraft,
    SmartFillRequest,
)
from app.services import (
    ExtractionFailedError,
    ExtractionService,
    ExtractionUnavailableError,
)
from app.services.extraction_service import get_extraction_service

ROUTER = APIRouter(prefix="/assist", tags=["Assistance"])


@ROUTER.post("/extract", response_model=RequestDraft)
async def smart_fill(
    payload: SmartFillRequest,
    extraction: t.Annotated[
        ExtractionService, Depends(get_extraction_service)
    ],
) -> RequestDraft:
    """Turn free text into a partially filled request.

    Args:
        payload (SmartFillRequest): The free text.
        extraction (ExtractionService): The AI assistance service.

    Returns:
        RequestDraft: The extracted draft, to be reviewed before submission.
    """
    try:
        return await extraction.extract_request_draft(payload.text)
    except ExtractionUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc
    except ExtractionFailedError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc


@ROUTER.post("/keywords", response_model=KeywordSuggestionResponse)
async def suggest_keywords(
    payload: KeywordSuggestionRequest,
    extraction: t.Annotated[
        ExtractionService, Depends(get_extraction_service)
    ],
) -> KeywordSuggestionResponse:
    """Suggest descriptive keywords for an item.

    Args:
        payload (KeywordSuggestionRequest): The item name and category.
        extraction (ExtractionService): The AI assistance service.

    Returns:
        KeywordSuggestionResponse: Suggestions, empty when unavailable.
    """
    return KeywordSuggestionResponse(
        keywords=await extraction.generate_item_keywords(
            payload.name, payload.category
        )
    )
