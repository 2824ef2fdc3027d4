"""Fulfillment status derivation for aid requests.

A request's status is computed from the *sums* of its item quantities, not
item by item: a request is Fulfilled as soon as the total received meets the
total needed, even if that total was reached unevenly across items. This
keeps the status a single coarse signal for donors. Do not turn it into a
per-item gate.

The functions here work on anything shaped like a request (``items``,
``status``, ``updated_at``) and an item (``quantity_needed``,
``quantity_received``), so ORM models and response schemas share them.
"""

import math
import typing as t

from app.core.models import RequestStatus
from app.utils.dates import now_ms


class QuantityLine(t.Protocol):  # pylint: disable=too-few-public-methods
    """An item carrying needed and received quantities."""

    quantity_needed: int
    quantity_received: int


class ItemHolder(t.Protocol):  # pylint: disable=too-few-public-methods
    """A request carrying items and a derived status."""

    items: t.Sequence[QuantityLine]
    status: RequestStatus
    updated_at: int


def derive_status(request: ItemHolder) -> RequestStatus:
    """Compute a request's status from the sums of its item quantities.

    Args:
        request (ItemHolder): The request to evaluate.

    Returns:
        RequestStatus:
            Fulfilled when something is needed and the total received
            covers the total needed, Partially Fulfilled when anything was
            received, Pending otherwise (including a request with no items).
    """
    total_needed: int = sum(item.quantity_needed for item in request.items)
    total_received: int = sum(
        item.quantity_received for item in request.items
    )

    if total_needed > 0 and total_received >= total_needed:
        return RequestStatus.FULFILLED
    if total_received > 0:
        return RequestStatus.PARTIALLY_FULFILLED
    return RequestStatus.PENDING


def clamp_received(quantity: t.Any, quantity_needed: int) -> int:
    """Clamp a received quantity into ``[0, quantity_needed]``.

    Malformed input never raises: non-numeric values count as 0, fractions
    are truncated, and out-of-range values snap to the nearest bound.

    Args:
        quantity (Any): The submitted quantity, possibly malformed.
        quantity_needed (int): The item's target quantity.

    Returns:
        int: A valid received quantity.
    """
    upper: int = max(0, quantity_needed)

    if isinstance(quantity, int):
        return min(max(0, quantity), upper)

    try:
        value: float = float(quantity)
    except (TypeError, ValueError):
        return 0

    if math.isnan(value) or value <= 0:
        return 0
    if value >= upper:
        return upper
    return int(value)


def set_received(
    request: ItemHolder, item: QuantityLine, quantity: t.Any
) -> t.Tuple[int, RequestStatus]:
    """Record a received quantity and refresh the owning request.

    Args:
        request (ItemHolder): The request that owns ``item``.
        item (QuantityLine): The item being confirmed.
        quantity (Any): The submitted received quantity.

    Returns:
        Tuple[int, RequestStatus]:
            The stored (clamped) quantity and the request's new status.
    """
    clamped: int = clamp_received(quantity, item.quantity_needed)
    item.quantity_received = clamped
    request.status = derive_status(request)
    request.updated_at = now_ms()
    return clamped, request.status
