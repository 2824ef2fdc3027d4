"""
Tests for location and category lookups.
"""

import pytest

from app.core.models import AidCategory
from app.utils.categories import get_categories, match_category
from app.utils.locations import (
    DISTRICTS,
    REGIONS,
    compose_location,
    match_district,
    match_region,
)


class TestLocations:
    """Test the district/region table."""

    def test_every_district_has_regions(self):
        assert len(DISTRICTS) == 16
        assert all(REGIONS[district] for district in DISTRICTS)

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Colombo", "Colombo"),
            ("  gampaha ", "Gampaha"),
            ("Narnia", None),
            ("", None),
            (None, None),
        ],
    )
    def test_match_district(self, name, expected):
        assert match_district(name) == expected

    def test_match_region_within_district_only(self):
        assert match_region("Jaffna", "nallur") == "Nallur"
        assert match_region("Colombo", "Nallur") is None
        assert match_region("Colombo", None) is None

    def test_compose_location(self):
        assert compose_location("Kandy", "Peradeniya") == "Kandy - Peradeniya"


class TestCategories:
    """Test category lookups."""

    def test_get_categories_in_order(self):
        categories = get_categories()

        assert [c["value"] for c in categories] == [
            "Food",
            "Water",
            "Medical Supplies",
            "Clothing",
            "Shelter",
            "Hygiene",
            "Other",
        ]

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Food", AidCategory.FOOD),
            ("medical supplies", AidCategory.MEDICAL),
            ("MEDICAL", AidCategory.MEDICAL),
            (AidCategory.HYGIENE, AidCategory.HYGIENE),
            ("Toys", AidCategory.OTHER),
            (None, AidCategory.OTHER),
            (3, AidCategory.OTHER),
        ],
    )
    def test_match_category(self, value, expected):
        assert match_category(value) == expected
