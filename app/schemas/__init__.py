"""Schemas package."""

from app.schemas.aid_request import (
    AidItemCreate,
    AidItemResponse,
    AidRequestCreate,
    AidRequestListResponse,
    AidRequestResponse,
    ReceivedQuantityResult,
    ReceivedQuantityUpdate,
)
from app.schemas.assist import (
    ExtractedItem,
    KeywordSuggestionRequest,
    KeywordSuggestionResponse,
    RequestDraft,
    SituationReport,
    SmartFillRequest,
)
from app.schemas.reference import (
    CategoryListResponse,
    CategoryOption,
    DistrictOption,
    LocationListResponse,
    UnitListResponse,
)
from app.schemas.statistics import (
    CategoryNeed,
    DashboardStats,
    IgnoredKeywordsResponse,
    KeywordStat,
    LocationNeed,
    LocationStat,
)

__all__ = [
    "AidItemCreate",
    "AidItemResponse",
    "AidRequestCreate",
    "AidRequestListResponse",
    "AidRequestResponse",
    "CategoryListResponse",
    "CategoryNeed",
    "CategoryOption",
    "DashboardStats",
    "DistrictOption",
    "ExtractedItem",
    "IgnoredKeywordsResponse",
    "KeywordStat",
    "KeywordSuggestionRequest",
    "KeywordSuggestionResponse",
    "LocationListResponse",
    "LocationNeed",
    "LocationStat",
    "ReceivedQuantityResult",
    "ReceivedQuantityUpdate",
    "RequestDraft",
    "SituationReport",
    "SmartFillRequest",
    "UnitListResponse",
]
