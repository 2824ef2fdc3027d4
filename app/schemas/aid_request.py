"""Pydantic schemas for aid request validation and responses."""

import re
import typing as t

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from app.core.globals import DEFAULT_UNIT, NIC_PATTERN, PHONE_PATTERN
from app.core.models import AidCategory, RequestStatus
from app.utils.locations import (
    compose_location,
    match_district,
    match_region,
)

PHONE_RE: re.Pattern[str] = re.compile(PHONE_PATTERN)


def _clean_keywords(value: t.List[str]) -> t.List[str]:
    return [kw.strip() for kw in value if kw and kw.strip()]


class AidItemBase(BaseModel):
    """Base aid item schema."""

    name: str = Field(..., min_length=1, max_length=255)
    category: AidCategory = AidCategory.OTHER
    quantity_needed: int = Field(1, ge=0)
    unit: str = Field(DEFAULT_UNIT, min_length=1, max_length=32)
    keywords: t.List[str] = Field(default_factory=list)


class AidItemCreate(AidItemBase):
    """Schema for one supply line of a new request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v: t.List[str]) -> t.List[str]:
        """Drop blank tags and trim the rest.

        Args:
            v (List[str]): The submitted keywords.

        Returns:
            List[str]: The cleaned keywords, order preserved.
        """
        return _clean_keywords(v)


class AidItemResponse(AidItemBase):
    """Schema for aid item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    quantity_received: int = 0


class AidRequestCreate(BaseModel):
    """Schema for submitting a new aid request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    nic: str = Field(..., pattern=NIC_PATTERN)
    full_name: str = Field(..., min_length=1, max_length=255)
    contact_number: str = Field(..., pattern=PHONE_PATTERN, max_length=32)
    extra_contact_number: str | None = Field(None, max_length=32)
    district: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    notes: str | None = Field(None, max_length=2000)
    items: t.List[AidItemCreate] = Field(..., min_length=1)

    @field_validator("extra_contact_number")
    @classmethod
    def validate_extra_contact_number(cls, v: str | None) -> str | None:
        """Accept an empty extra number as absent, otherwise check format.

        Args:
            v (str | None): The optional second phone number.

        Returns:
            str | None: The number, or None when left empty.
        """
        if not v:
            return None
        if PHONE_RE.match(v) is None:
            raise ValueError("Please enter a valid phone number")
        return v

    @model_validator(mode="after")
    def validate_location(self) -> "AidRequestCreate":
        """Match the location against the table, ignoring case.

        The canonical district and region names replace what was typed.
        """
        district: str | None = match_district(self.district)
        region: str | None = (
            match_region(district, self.region)
            if district is not None
            else None
        )
        if district is None or region is None:
            raise ValueError(
                f"Unknown region '{self.region}' for district"
                f" '{self.district}'"
            )
        self.district = district
        self.region = region
        return self

    @property
    def location(self) -> str:
        """The composite ``District - Region`` key."""
        return compose_location(self.district, self.region)


class AidRequestResponse(BaseModel):
    """Schema for aid request response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    nic: str
    full_name: str
    contact_number: str
    extra_contact_number: str | None = None
    location: str
    notes: str | None = None
    items: t.List[AidItemResponse]
    status: RequestStatus
    created_at: int
    updated_at: int


class AidRequestListResponse(BaseModel):
    """Schema for paginated aid request list response."""

    requests: t.List[AidRequestResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class ReceivedQuantityUpdate(BaseModel):
    """Schema for confirming receipt of an item.

    The key is required. Any value is accepted; it is clamped into the
    valid range rather than rejected.
    """

    quantity_received: t.Any = Field(...)


class ReceivedQuantityResult(BaseModel):
    """Schema for the outcome of a received-quantity update."""

    request_id: str
    item_id: str
    quantity_received: int
    status: RequestStatus
    updated_at: int
