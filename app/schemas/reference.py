"""Pydantic schemas for reference data."""

import typing as t

from pydantic import BaseModel


class CategoryOption(BaseModel):
    """A selectable aid category."""

    value: str
    label: str


class CategoryListResponse(BaseModel):
    """Schema for category list response."""

    categories: t.List[CategoryOption]
    total: int


class UnitListResponse(BaseModel):
    """Schema for unit list response."""

    units: t.List[str]
    default: str


class DistrictOption(BaseModel):
    """A district and the regions that belong to it."""

    name: str
    regions: t.List[str]


class LocationListResponse(BaseModel):
    """Schema for the district/region table."""

    districts: t.List[DistrictOption]
    total: int
