"""SQLAlchemy database models."""

import enum
import typing as t

from sqlalchemy import (
    JSON,
    BigInteger,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class AidCategory(str, enum.Enum):
    """Category of a requested supply line."""

    FOOD = "Food"
    WATER = "Water"
    MEDICAL = "Medical Supplies"
    CLOTHING = "Clothing"
    SHELTER = "Shelter"
    HYGIENE = "Hygiene"
    OTHER = "Other"


class RequestStatus(str, enum.Enum):
    """Fulfillment status of an aid request, always derived from its items."""

    PENDING = "Pending"
    PARTIALLY_FULFILLED = "Partially Fulfilled"
    FULFILLED = "Fulfilled"


class AidRequest(Base):  # pylint: disable=too-few-public-methods
    """A beneficiary's request for supplies."""

    __tablename__ = "aid_requests"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    nic: Mapped[str] = mapped_column(String(20), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_number: Mapped[str] = mapped_column(String(32), nullable=False)
    extra_contact_number: Mapped[str | None] = mapped_column(
        String(32), nullable=True
    )
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    # values_callable stores "Partially Fulfilled" rather than the member name
    status: Mapped[RequestStatus] = mapped_column(
        Enum(
            RequestStatus,
            values_callable=lambda e: [member.value for member in e],
            native_enum=False,
            length=32,
        ),
        nullable=False,
        default=RequestStatus.PENDING,
    )
    # Epoch milliseconds
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index("ix_aid_requests_nic", "nic"),
        Index("ix_aid_requests_location", "location"),
    )

    # Relationships
    items: Mapped[t.List["AidItem"]] = relationship(
        "AidItem",
        back_populates="request",
        cascade="all, delete-orphan",
        order_by="AidItem.position",
        lazy="selectin",
    )


class AidItem(Base):  # pylint: disable=too-few-public-methods
    """One requested supply line, owned by exactly one request."""

    __tablename__ = "aid_items"

    request_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("aid_requests.id", ondelete="CASCADE"),
        primary_key=True,
    )
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[AidCategory] = mapped_column(
        Enum(
            AidCategory,
            values_callable=lambda e: [member.value for member in e],
            native_enum=False,
            length=32,
        ),
        nullable=False,
        default=AidCategory.OTHER,
    )
    quantity_needed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    quantity_received: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    unit: Mapped[str] = mapped_column(
        String(32), nullable=False, default="units"
    )
    keywords: Mapped[t.List[str]] = mapped_column(
        JSON, nullable=False, default=list
    )

    # Relationships
    request: Mapped["AidRequest"] = relationship(
        "AidRequest", back_populates="items"
    )


class IgnoredKeyword(Base):  # pylint: disable=too-few-public-methods
    """A keyword the classifier flagged as too generic for the dashboard."""

    __tablename__ = "ignored_keywords"

    keyword: Mapped[str] = mapped_column(String(100), primary_key=True)
    flagged_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
