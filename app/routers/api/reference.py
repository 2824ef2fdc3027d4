"""Reference data endpoints: categories, units and locations."""

from fastapi import APIRouter

from app.core.globals import DEFAULT_UNIT, UNITS
from app.schemas.reference import (
    CategoryListResponse,
    CategoryOption,
    DistrictOption,
    LocationListResponse,
    UnitListResponse,
)
from app.utils.categories import get_categories
from app.utils.locations import REGIONS

ROUTER = APIRouter(prefix="/reference", tags=["Reference"])


@ROUTER.get("/categories", response_model=CategoryListResponse)
async def list_categories() -> CategoryListResponse:
    """List the aid categories.

    Returns:
        CategoryListResponse: Every category in display order.
    """
    categories = [CategoryOption(**option) for option in get_categories()]
    return CategoryListResponse(categories=categories, total=len(categories))


@ROUTER.get("/units", response_model=UnitListResponse)
async def list_units() -> UnitListResponse:
    """List the suggested units of measurement.

    Returns:
        UnitListResponse: The units and the default one.
    """
    return UnitListResponse(units=UNITS, default=DEFAULT_UNIT)


@ROUTER.get("/locations", response_model=LocationListResponse)
async def list_locations() -> LocationListResponse:
    """List every district with its regions.

    Returns:
        LocationListResponse: The district/region table.
    """
    districts = [
        DistrictOption(name=name, regions=regions)
        for name, regions in REGIONS.items()
    ]
    return LocationListResponse(districts=districts, total=len(districts))
