"""Services package."""

from app.services.extraction_service import (
    ExtractionFailedError,
    ExtractionService,
    ExtractionUnavailableError,
)
from app.services.keyword_service import KeywordService
from app.services.request_service import (
    RequestItemNotFoundError,
    RequestNotFoundError,
    RequestService,
)

__all__ = [
    "ExtractionFailedError",
    "ExtractionService",
    "ExtractionUnavailableError",
    "KeywordService",
    "RequestItemNotFoundError",
    "RequestNotFoundError",
    "RequestService",
]
