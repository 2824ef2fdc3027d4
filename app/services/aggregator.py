"""Dashboard statistics over the full collection of aid requests.

Every call recomputes the whole snapshot from its inputs; nothing is cached
between calls. All rankings use stable sorts, so ties keep the order in which
their keys were first encountered while walking requests, then items, then
keywords.
"""

import typing as t

from app.core.globals import (
    TOP_CATEGORIES,
    TOP_KEYWORDS,
    TOP_LOCATIONS,
    TOP_URGENT_REGIONS,
)
from app.core.models import AidCategory, RequestStatus
from app.schemas.statistics import (
    CategoryNeed,
    DashboardStats,
    KeywordStat,
    LocationNeed,
    LocationStat,
)


class AggregatedItem(t.Protocol):  # pylint: disable=too-few-public-methods
    """An item as seen by the aggregator."""

    name: str
    category: AidCategory
    quantity_needed: int
    quantity_received: int
    keywords: t.Sequence[str] | None


class AggregatedRequest(t.Protocol):  # pylint: disable=too-few-public-methods
    """A request as seen by the aggregator."""

    location: str
    status: RequestStatus
    items: t.Sequence[AggregatedItem]


class _Tally:  # pylint: disable=too-few-public-methods
    """Running needed/remaining totals for one key."""

    __slots__ = ("needed", "remaining")

    def __init__(self) -> None:
        self.needed: int = 0
        self.remaining: int = 0

    def add(self, needed: int, remaining: int) -> None:
        self.needed += needed
        self.remaining += remaining

    @property
    def percentage(self) -> int:
        return unfulfilled_percentage(self.remaining, self.needed)


def unfulfilled_percentage(remaining: int, needed: int) -> int:
    """Share of ``needed`` still outstanding, as a whole percentage.

    Halves round up (12.5 -> 13), matching how the figures are shown to
    donors.

    Args:
        remaining (int): Quantity still outstanding.
        needed (int): Quantity requested.

    Returns:
        int: ``round(remaining / needed * 100)``, or 0 when nothing is needed.
    """
    if needed <= 0:
        return 0
    return (200 * remaining + needed) // (2 * needed)


def normalize_keyword(keyword: str) -> str:
    """Case-fold a keyword for counting and matching."""
    return keyword.strip().lower()


def remaining_quantity(item: AggregatedItem) -> int:
    """Outstanding quantity of an item, never negative."""
    return max(0, item.quantity_needed - item.quantity_received)


def collect_vocabulary(requests: t.Iterable[AggregatedRequest]) -> t.List[str]:
    """Distinct normalized keywords across every item, in encounter order.

    Args:
        requests (Iterable[AggregatedRequest]): The request collection.

    Returns:
        List[str]: The keyword vocabulary.
    """
    seen: t.Dict[str, None] = {}
    for request in requests:
        for item in request.items:
            for keyword in item.keywords or []:
                normalized: str = normalize_keyword(keyword)
                if normalized:
                    seen.setdefault(normalized, None)
    return list(seen)


def aggregate(
    requests: t.Sequence[AggregatedRequest],
    ignored_keywords: t.Iterable[str] | None = None,
) -> DashboardStats:
    """Compute the dashboard snapshot for a request collection.

    Args:
        requests (Sequence[AggregatedRequest]):
            Every request to summarise.
        ignored_keywords (Iterable[str] | None):
            Keywords flagged as too generic; matched case-insensitively.
            None or empty disables filtering.

    Returns:
        DashboardStats: The recomputed statistics.
    """
    ignored: t.Set[str] = {
        normalize_keyword(keyword) for keyword in ignored_keywords or ()
    }

    by_category: t.Dict[AidCategory, _Tally] = {}
    by_location: t.Dict[str, _Tally] = {}
    keyword_counts: t.Dict[str, int] = {}
    fulfilled: int = 0

    for request in requests:
        # Keyword eligibility follows the request-level status, not the
        # item remainder alone.
        open_request: bool = request.status != RequestStatus.FULFILLED
        if not open_request:
            fulfilled += 1
        location: _Tally = by_location.setdefault(request.location, _Tally())

        for item in request.items:
            remaining: int = remaining_quantity(item)
            by_category.setdefault(item.category, _Tally()).add(
                item.quantity_needed, remaining
            )
            location.add(item.quantity_needed, remaining)

            if not open_request or remaining <= 0:
                continue
            for keyword in item.keywords or []:
                normalized: str = normalize_keyword(keyword)
                if not normalized or normalized in ignored:
                    continue
                keyword_counts[normalized] = (
                    keyword_counts.get(normalized, 0) + 1
                )

    top_needed_items: t.List[CategoryNeed] = sorted(
        (
            CategoryNeed(
                category=category, unfulfilled_percentage=tally.percentage
            )
            for category, tally in by_category.items()
        ),
        key=lambda need: need.unfulfilled_percentage,
        reverse=True,
    )[:TOP_CATEGORIES]

    needs_by_location: t.List[LocationNeed] = [
        LocationNeed(location=name, unfulfilled_count=tally.remaining)
        for name, tally in by_location.items()
    ]

    location_stats: t.List[LocationStat] = sorted(
        (
            LocationStat(
                location=name,
                unfulfilled_count=tally.remaining,
                total_needed=tally.needed,
                unfulfilled_percentage=tally.percentage,
            )
            for name, tally in by_location.items()
        ),
        key=lambda stat: stat.unfulfilled_percentage,
        reverse=True,
    )[:TOP_LOCATIONS]

    top_urgent_regions: t.List[LocationNeed] = sorted(
        needs_by_location,
        key=lambda need: need.unfulfilled_count,
        reverse=True,
    )[:TOP_URGENT_REGIONS]

    keyword_stats: t.List[KeywordStat] = sorted(
        (
            KeywordStat(keyword=keyword, frequency=count)
            for keyword, count in keyword_counts.items()
        ),
        key=lambda stat: stat.frequency,
        reverse=True,
    )[:TOP_KEYWORDS]

    return DashboardStats(
        total_requests=len(requests),
        fulfilled_requests=fulfilled,
        pending_requests=len(requests) - fulfilled,
        top_needed_items=top_needed_items,
        needs_by_location=needs_by_location,
        location_stats=location_stats,
        top_urgent_regions=top_urgent_regions,
        keyword_stats=keyword_stats,
    )
