"""AI assistance backed by the Groq chat completions API.

Covers smart fill (free text to request draft), keyword suggestions,
generic-keyword classification and the donor situation report. Only smart
fill reports failures to the caller; the other helpers degrade to an empty or
fallback result so they never block a page.
"""

import json
import logging
import typing as t

import groq
from groq import AsyncGroq
from pydantic import ValidationError

from app.core.config import SETTINGS
from app.core.globals import DEFAULT_UNIT
from app.core.models import AidCategory, RequestStatus
from app.schemas.assist import ExtractedItem, RequestDraft, SituationReport
from app.services.aggregator import (
    AggregatedRequest,
    normalize_keyword,
    remaining_quantity,
)
from app.utils.categories import match_category
from app.utils.locations import match_district, match_region

LOGGER: logging.Logger = logging.getLogger(__name__)

REPORT_FALLBACK: str = "AI analysis unavailable at this time."

_CATEGORY_NAMES: str = ", ".join(category.value for category in AidCategory)

_KEYWORD_GUIDANCE: str = (
    "Avoid generic single adjectives (e.g., use \"Casual Wear\" instead of"
    " \"Casual\", \"Dry Rations\" instead of \"Dry\"). Focus on specific"
    " types, synonyms, or functional attributes that help define the item"
    " clearly for donors and logistics."
)

_EXTRACT_SYSTEM: str = (
    "You extract structured disaster-relief aid requests from free text."
    " Reply with a single JSON object with the keys fullName, nic,"
    " contactNumber, district, region, notes and items. Use null for"
    " anything the text does not state. items is an array of objects with"
    " name, quantity (number), unit, category and keywords (array of 5"
    f" strings). category must be one of: {_CATEGORY_NAMES}. "
    + _KEYWORD_GUIDANCE
)

_CLASSIFY_SYSTEM: str = (
    "You review tags attached to disaster-relief supply requests. Flag the"
    " tags that are too generic to tell donors what is needed, such as"
    " \"urgent\", \"needed\", \"essential\" or \"supplies\". Reply with a"
    " JSON object {\"generic\": [...]} listing the flagged tags exactly as"
    " given."
)

_REPORT_SYSTEM: str = (
    "You write concise executive summaries for humanitarian donors. Keep the"
    " tone professional and humanitarian."
)


class ExtractionUnavailableError(Exception):
    """Raised when AI assistance is requested but not configured."""

    def __init__(self) -> None:
        super().__init__("AI assistance is not configured")


class ExtractionFailedError(Exception):
    """Raised when the AI service call or its output is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def _clean_text(value: t.Any) -> str | None:
    if value is None:
        return None
    text: str = str(value).strip()
    return text or None


def _to_quantity(value: t.Any) -> int:
    """Read an extracted quantity, defaulting to 1 when absent or zero."""
    try:
        quantity: int = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return quantity if quantity > 0 else 1


def _to_keywords(value: t.Any) -> t.List[str]:
    if not isinstance(value, list):
        return []
    return [str(kw).strip() for kw in value if kw and str(kw).strip()]


def normalize_draft(payload: t.Any) -> RequestDraft:
    """Turn a raw smart fill payload into a validated draft.

    Unknown categories become Other, missing quantities become 1, missing
    units become the default unit, and district/region are matched against
    the lookup table (dropped when unknown).

    Args:
        payload (Any): The decoded JSON object from the AI service.

    Returns:
        RequestDraft: The cleaned draft.
    """
    if not isinstance(payload, dict):
        raise ExtractionFailedError("Smart fill returned an unexpected shape")

    district: str | None = match_district(_clean_text(payload.get("district")))
    region: str | None = (
        match_region(district, _clean_text(payload.get("region")))
        if district is not None
        else None
    )

    items: t.List[ExtractedItem] = []
    for raw in payload.get("items") or []:
        if not isinstance(raw, dict):
            continue
        name: str | None = _clean_text(raw.get("name"))
        if name is None:
            continue
        items.append(
            ExtractedItem(
                name=name,
                quantity=_to_quantity(raw.get("quantity")),
                unit=_clean_text(raw.get("unit")) or DEFAULT_UNIT,
                category=match_category(raw.get("category")),
                keywords=_to_keywords(raw.get("keywords")),
            )
        )

    return RequestDraft(
        full_name=_clean_text(payload.get("fullName")),
        nic=_clean_text(payload.get("nic")),
        contact_number=_clean_text(payload.get("contactNumber")),
        district=district,
        region=region,
        notes=_clean_text(payload.get("notes")),
        items=items,
    )


def outstanding_needs(
    requests: t.Iterable[AggregatedRequest],
) -> t.List[t.Dict[str, t.Any]]:
    """Compact view of what non-fulfilled requests still need.

    Args:
        requests (Iterable[AggregatedRequest]): The request collection.

    Returns:
        List[Dict[str, Any]]:
            One entry per open request with its location and the remaining
            quantity of each item.
    """
    return [
        {
            "loc": request.location,
            "items": [
                {
                    "n": item.name,
                    "q": remaining_quantity(item),
                    "c": AidCategory(item.category).value,
                }
                for item in request.items
            ],
        }
        for request in requests
        if request.status != RequestStatus.FULFILLED
    ]


class ExtractionService:
    """Service class for AI-assisted request handling."""

    client: AsyncGroq | None

    def __init__(self, client: AsyncGroq | None = None) -> None:
        """Initialize ExtractionService.

        Args:
            client (AsyncGroq | None):
                A preconfigured client. When omitted, one is built from the
                settings if an API key is configured.
        """
        if client is None and SETTINGS.ai_enabled:
            client = AsyncGroq(
                api_key=SETTINGS.groq_api_key,
                timeout=SETTINGS.groq_timeout_seconds,
            )
        self.client = client

    @property
    def enabled(self) -> bool:
        """Whether a client is available."""
        return self.client is not None

    async def _complete(
        self, system: str, prompt: str, json_mode: bool = True
    ) -> str:
        if self.client is None:
            raise ExtractionUnavailableError()

        options: t.Dict[str, t.Any] = {}
        if json_mode:
            options["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(
            model=SETTINGS.groq_model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=0.2,
            **options,
        )
        if not response.choices:
            raise ExtractionFailedError("AI service returned no choices")
        return (response.choices[0].message.content or "").strip()

    async def _complete_json(self, system: str, prompt: str) -> t.Any:
        try:
            content: str = await self._complete(system, prompt)
            return json.loads(content)
        except groq.GroqError as exc:
            raise ExtractionFailedError(f"AI service error: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ExtractionFailedError(
                "AI service returned invalid JSON"
            ) from exc

    async def extract_request_draft(self, text: str) -> RequestDraft:
        """Extract a partially filled request from free text.

        Args:
            text (str): The beneficiary's own description of their needs.

        Returns:
            RequestDraft: The extracted draft.

        Raises:
            ExtractionUnavailableError: When no AI client is configured.
            ExtractionFailedError: When the call or its output fails.
        """
        payload: t.Any = await self._complete_json(
            _EXTRACT_SYSTEM, f'Text: "{text}"'
        )
        try:
            return normalize_draft(payload)
        except ValidationError as exc:
            raise ExtractionFailedError(
                "Smart fill returned unusable items"
            ) from exc

    async def generate_item_keywords(
        self, name: str, category: AidCategory
    ) -> t.List[str]:
        """Suggest five descriptive keywords for one item.

        Args:
            name (str): The item name.
            category (AidCategory): The item category.

        Returns:
            List[str]: The suggestions, or an empty list on any failure.
        """
        if not self.enabled:
            return []
        prompt: str = (
            "Generate 5 specific and descriptive keywords or tags for the aid"
            f' item "{name}" which is in the category "{category.value}". '
            + _KEYWORD_GUIDANCE
            + ' Reply with a JSON object {"keywords": [...]}.'
        )
        try:
            payload: t.Any = await self._complete_json(
                "You tag disaster-relief supply items.", prompt
            )
        except ExtractionFailedError:
            LOGGER.warning("Keyword suggestion failed for %r", name)
            return []
        if not isinstance(payload, dict):
            return []
        return _to_keywords(payload.get("keywords"))

    async def classify_generic_keywords(
        self, vocabulary: t.Sequence[str]
    ) -> t.List[str]:
        """Flag the keywords too generic to be useful on the dashboard.

        Args:
            vocabulary (Sequence[str]): Distinct normalized keywords.

        Returns:
            List[str]:
                The flagged subset of ``vocabulary`` in vocabulary order; an
                empty list when disabled or on any failure.
        """
        if not self.enabled or not vocabulary:
            return []
        try:
            payload: t.Any = await self._complete_json(
                _CLASSIFY_SYSTEM, json.dumps({"tags": list(vocabulary)})
            )
        except ExtractionFailedError:
            LOGGER.warning("Generic keyword classification failed")
            return []
        if not isinstance(payload, dict):
            return []

        flagged: t.Set[str] = {
            normalize_keyword(keyword)
            for keyword in _to_keywords(payload.get("generic"))
        }
        return [keyword for keyword in vocabulary if keyword in flagged]

    async def generate_situation_report(
        self, requests: t.Sequence[AggregatedRequest]
    ) -> SituationReport:
        """Summarise outstanding needs for donors.

        Args:
            requests (Sequence[AggregatedRequest]): The request collection.

        Returns:
            SituationReport:
                The report, or a fallback message when disabled or failing.
        """
        if not self.enabled:
            return SituationReport(report=REPORT_FALLBACK, generated=False)

        prompt: str = (
            "Here is a dataset of aid requests in JSON format. Generate a"
            " concise, 3-paragraph executive summary for donors.\n"
            "Paragraph 1: Overview of the most critical needs (high quantity"
            " items).\n"
            "Paragraph 2: Location-based analysis (which areas are suffering"
            " most).\n"
            "Paragraph 3: Recommendations for supply chain priority.\n\n"
            f"Dataset: {json.dumps(outstanding_needs(requests))}"
        )
        try:
            report: str = await self._complete(
                _REPORT_SYSTEM, prompt, json_mode=False
            )
        except (groq.GroqError, ExtractionFailedError):
            LOGGER.exception("Situation report generation failed")
            return SituationReport(report=REPORT_FALLBACK, generated=False)

        if not report:
            return SituationReport(
                report="Unable to generate report.", generated=False
            )
        return SituationReport(report=report, generated=True)


def get_extraction_service() -> ExtractionService:
    """Dependency to get the AI assistance service.

    Returns:
        ExtractionService: A service configured from the settings.
    """
    return ExtractionService()
