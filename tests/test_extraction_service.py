"""
Tests for the AI assistance service, using a fake Groq client.
"""

import json

import groq
import httpx
import pytest

from app.core.models import AidCategory, RequestStatus
from app.services.extraction_service import (
    REPORT_FALLBACK,
    ExtractionFailedError,
    ExtractionService,
    ExtractionUnavailableError,
    normalize_draft,
    outstanding_needs,
)


def _api_error() -> groq.APIConnectionError:
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat")
    return groq.APIConnectionError(request=request)


class TestNormalizeDraft:
    """Test cleaning of smart fill payloads."""

    def test_full_payload(self):
        draft = normalize_draft(
            {
                "fullName": "  Nimal Perera ",
                "nic": "199012345678",
                "contactNumber": "0771234567",
                "district": "kandy",
                "region": "PERADENIYA",
                "notes": "Roof damaged",
                "items": [
                    {
                        "name": "Tarpaulin",
                        "quantity": 2,
                        "unit": "pieces",
                        "category": "Shelter",
                        "keywords": ["Waterproof Sheet", " ", "Roof Cover"],
                    }
                ],
            }
        )

        assert draft.full_name == "Nimal Perera"
        assert draft.district == "Kandy"
        assert draft.region == "Peradeniya"
        assert draft.notes == "Roof damaged"
        assert len(draft.items) == 1
        item = draft.items[0]
        assert item.category == AidCategory.SHELTER
        assert item.quantity == 2
        assert item.keywords == ["Waterproof Sheet", "Roof Cover"]

    def test_missing_values_get_defaults(self):
        draft = normalize_draft(
            {
                "fullName": None,
                "items": [
                    {"name": "Milk powder", "category": "Baby stuff"},
                    {"name": "Candles", "quantity": "0"},
                    {"quantity": 4},
                    "not an item",
                ],
            }
        )

        assert draft.full_name is None
        assert [item.name for item in draft.items] == ["Milk powder", "Candles"]
        assert draft.items[0].category == AidCategory.OTHER
        assert draft.items[0].quantity == 1
        assert draft.items[0].unit == "units"
        assert draft.items[1].quantity == 1

    def test_unknown_location_is_dropped(self):
        draft = normalize_draft({"district": "Atlantis", "region": "Dehiwala"})

        assert draft.district is None
        assert draft.region is None

    def test_region_outside_district_is_dropped(self):
        draft = normalize_draft({"district": "Colombo", "region": "Nallur"})

        assert draft.district == "Colombo"
        assert draft.region is None

    def test_non_object_payload_fails(self):
        with pytest.raises(ExtractionFailedError):
            normalize_draft(["not", "an", "object"])


class TestExtractRequestDraft:
    """Test smart fill through the client."""

    async def test_disabled_service_is_unavailable(self):
        with pytest.raises(ExtractionUnavailableError):
            await ExtractionService(client=None).extract_request_draft("help")

    async def test_uses_json_mode(self, fake_ai):
        client = fake_ai(json.dumps({"items": [{"name": "Rice"}]}))

        draft = await ExtractionService(client).extract_request_draft(
            "We need rice"
        )

        assert draft.items[0].name == "Rice"
        call = client.chat.completions.calls[0]
        assert call["response_format"] == {"type": "json_object"}
        assert "We need rice" in call["messages"][1]["content"]

    async def test_invalid_json_fails(self, fake_ai):
        with pytest.raises(ExtractionFailedError):
            await ExtractionService(fake_ai("not json")).extract_request_draft(
                "text"
            )

    async def test_api_error_fails(self, fake_ai):
        with pytest.raises(ExtractionFailedError):
            await ExtractionService(
                fake_ai(_api_error())
            ).extract_request_draft("text")

    async def test_reply_without_choices_fails(self, fake_ai):
        with pytest.raises(ExtractionFailedError):
            await ExtractionService(fake_ai(None)).extract_request_draft(
                "text"
            )


class TestGenerateItemKeywords:
    """Test keyword suggestions."""

    async def test_returns_suggestions(self, fake_ai):
        client = fake_ai(
            json.dumps({"keywords": ["Bottled Water", "Hydration", ""]})
        )

        keywords = await ExtractionService(client).generate_item_keywords(
            "Water", AidCategory.WATER
        )

        assert keywords == ["Bottled Water", "Hydration"]

    async def test_failure_returns_empty(self, fake_ai):
        keywords = await ExtractionService(
            fake_ai(_api_error())
        ).generate_item_keywords("Water", AidCategory.WATER)

        assert keywords == []

    async def test_disabled_returns_empty(self):
        keywords = await ExtractionService(None).generate_item_keywords(
            "Water", AidCategory.WATER
        )

        assert keywords == []


class TestClassifyGenericKeywords:
    """Test generic keyword classification."""

    async def test_restricted_to_vocabulary(self, fake_ai):
        client = fake_ai(
            json.dumps({"generic": ["Urgent", "needed", "invented"]})
        )
        vocabulary = ["rice", "needed", "urgent", "tents"]

        flagged = await ExtractionService(client).classify_generic_keywords(
            vocabulary
        )

        assert flagged == ["needed", "urgent"]

    async def test_empty_vocabulary_skips_call(self, fake_ai):
        client = fake_ai()

        flagged = await ExtractionService(client).classify_generic_keywords([])

        assert flagged == []
        assert client.chat.completions.calls == []

    async def test_failure_returns_empty(self, fake_ai):
        flagged = await ExtractionService(
            fake_ai("{broken")
        ).classify_generic_keywords(["urgent"])

        assert flagged == []

    async def test_unexpected_shape_returns_empty(self, fake_ai):
        flagged = await ExtractionService(
            fake_ai(json.dumps(["urgent"]))
        ).classify_generic_keywords(["urgent"])

        assert flagged == []

    async def test_reply_without_choices_returns_empty(self, fake_ai):
        flagged = await ExtractionService(
            fake_ai(None)
        ).classify_generic_keywords(["urgent"])

        assert flagged == []


class TestSituationReport:
    """Test the donor situation report."""

    async def test_disabled_falls_back(self, make_item, make_request):
        report = await ExtractionService(None).generate_situation_report(
            [make_request([make_item()])]
        )

        assert report.generated is False
        assert report.report == REPORT_FALLBACK

    async def test_error_falls_back(self, fake_ai):
        report = await ExtractionService(
            fake_ai(_api_error())
        ).generate_situation_report([])

        assert report.generated is False
        assert report.report == REPORT_FALLBACK

    async def test_reply_without_choices_falls_back(self, fake_ai):
        report = await ExtractionService(
            fake_ai(None)
        ).generate_situation_report([])

        assert report.generated is False
        assert report.report == REPORT_FALLBACK

    async def test_generated_report(self, fake_ai, make_item, make_request):
        client = fake_ai("  Colombo needs water.  ")
        requests = [make_request([make_item(needed=5, name="Water")])]

        report = await ExtractionService(client).generate_situation_report(
            requests
        )

        assert report.generated is True
        assert report.report == "Colombo needs water."
        assert "response_format" not in client.chat.completions.calls[0]


def test_outstanding_needs_skips_fulfilled(make_item, make_request):
    requests = [
        make_request(
            [make_item(needed=8, received=3, name="Water")],
            location="Jaffna - Nallur",
        ),
        make_request(
            [make_item(needed=2, received=2)], status=RequestStatus.FULFILLED
        ),
    ]

    assert outstanding_needs(requests) == [
        {
            "loc": "Jaffna - Nallur",
            "items": [{"n": "Water", "q": 5, "c": "Food"}],
        }
    ]
