"""Pydantic schemas for AI assistance endpoints."""

import typing as t

from pydantic import BaseModel, Field

from app.core.globals import DEFAULT_UNIT
from app.core.models import AidCategory


class SmartFillRequest(BaseModel):
    """Free text describing someone's situation and needs."""

    text: str = Field(..., min_length=1, max_length=5000)


class ExtractedItem(BaseModel):
    """An item recognised in free text."""

    name: str
    quantity: int = Field(1, ge=0)
    unit: str = DEFAULT_UNIT
    category: AidCategory = AidCategory.OTHER
    keywords: t.List[str] = Field(default_factory=list)


class RequestDraft(BaseModel):
    """A partially filled request produced by smart fill.

    Every field may be missing; the submitter completes and confirms the
    draft before it becomes a request.
    """

    full_name: str | None = None
    nic: str | None = None
    contact_number: str | None = None
    district: str | None = None
    region: str | None = None
    notes: str | None = None
    items: t.List[ExtractedItem] = Field(default_factory=list)


class KeywordSuggestionRequest(BaseModel):
    """Item to suggest keywords for."""

    name: str = Field(..., min_length=1, max_length=255)
    category: AidCategory = AidCategory.OTHER


class KeywordSuggestionResponse(BaseModel):
    """Suggested keywords for an item."""

    keywords: t.List[str]


class SituationReport(BaseModel):
    """Donor-facing summary of outstanding needs."""

    report: str
    generated: bool
