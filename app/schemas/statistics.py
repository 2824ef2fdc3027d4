"""Pydantic schemas for dashboard statistics."""

import typing as t

from pydantic import BaseModel

from app.core.models import AidCategory


class CategoryNeed(BaseModel):
    """Share of a category's requested quantity still outstanding."""

    category: AidCategory
    unfulfilled_percentage: int


class LocationNeed(BaseModel):
    """Outstanding item quantity for one location."""

    location: str
    unfulfilled_count: int


class LocationStat(LocationNeed):
    """Outstanding item quantity for one location, with its share."""

    total_needed: int
    unfulfilled_percentage: int


class KeywordStat(BaseModel):
    """How often a keyword tags an outstanding item."""

    keyword: str
    frequency: int


class DashboardStats(BaseModel):
    """Schema for the donor dashboard snapshot."""

    total_requests: int
    fulfilled_requests: int
    pending_requests: int
    top_needed_items: t.List[CategoryNeed]
    needs_by_location: t.List[LocationNeed]
    location_stats: t.List[LocationStat]
    top_urgent_regions: t.List[LocationNeed]
    keyword_stats: t.List[KeywordStat]


class IgnoredKeywordsResponse(BaseModel):
    """Schema for the stored list of generic keywords."""

    keywords: t.List[str]
    total: int
