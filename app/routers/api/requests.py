"""Aid request endpoints."""

import typing as t

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.globals import NIC_PATTERN
from app.core.models import RequestStatus
from app.schemas.aid_request import (
    AidRequestCreate,
    AidRequestListResponse,
    AidRequestResponse,
    ReceivedQuantityResult,
    ReceivedQuantityUpdate,
)
from app.services import (
    RequestItemNotFoundError,
    RequestNotFoundError,
    RequestService,
)

ROUTER = APIRouter(prefix="/requests", tags=["Aid Requests"])


@ROUTER.get("", response_model=AidRequestListResponse)
async def list_requests(
    db: t.Annotated[AsyncSession, Depends(get_db)],
    location: str | None = Query(
        None, description="Filter by exact 'District - Region' location"
    ),
    request_status: RequestStatus | None = Query(
        None, alias="status", description="Filter by fulfillment status"
    ),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Requests per page"),
) -> AidRequestListResponse:
    """List aid requests, newest first, with optional filters.

    Args:
        db (AsyncSession):
            The database session.
        location (str | None):
            Filter by exact location.
        request_status (RequestStatus | None):
            Filter by fulfillment status.
        page (int):
            Page number for pagination.
        page_size (int):
            Number of requests per page.

    Returns:
        AidRequestListResponse: Paginated list of aid requests.
    """
    return await RequestService(db).list_requests(
        location=location,
        request_status=request_status,
        page=page,
        page_size=page_size,
    )


@ROUTER.get("/lookup", response_model=t.List[AidRequestResponse])
async def lookup_requests(
    db: t.Annotated[AsyncSession, Depends(get_db)],
    nic: str = Query(
        ...,
        pattern=NIC_PATTERN,
        description="NIC or ID number (12 digits, or 9 digits + V/X)",
    ),
) -> t.List[AidRequestResponse]:
    """Find every request filed under a NIC.

    Args:
        db (AsyncSession): The database session.
        nic (str): The NIC, matched case-insensitively.

    Returns:
        List[AidRequestResponse]: Matching requests, oldest first.
    """
    return await RequestService(db).find_by_nic(nic)


@ROUTER.get("/{request_id}", response_model=AidRequestResponse)
async def get_request(
    request_id: str,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> AidRequestResponse:
    """Get a specific aid request by ID.

    Args:
        request_id (str): The ID of the aid request.
        db (AsyncSession): The database session.

    Returns:
        AidRequestResponse: The aid request data.
    """
    try:
        return await RequestService(db).get_request(request_id)
    except RequestNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@ROUTER.post(
    "", response_model=AidRequestResponse, status_code=status.HTTP_201_CREATED
)
async def create_request(
    request_data: AidRequestCreate,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> AidRequestResponse:
    """Submit a new aid request. Its status starts as Pending.

    Args:
        request_data (AidRequestCreate): The validated submission.
        db (AsyncSession): The database session.

    Returns:
        AidRequestResponse: The created aid request.
    """
    return await RequestService(db).create_request(request_data)


@ROUTER.patch(
    "/{request_id}/items/{item_id}", response_model=ReceivedQuantityResult
)
async def update_received_quantity(
    request_id: str,
    item_id: str,
    update: ReceivedQuantityUpdate,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> ReceivedQuantityResult:
    """Confirm how much of an item has been received.

    Out-of-range or malformed quantities are clamped, not rejected.

    Args:
        request_id (str): The ID of the aid request.
        item_id (str): The ID of the item within the request.
        update (ReceivedQuantityUpdate): The submitted quantity.
        db (AsyncSession): The database session.

    Returns:
        ReceivedQuantityResult: The stored quantity and the new status.
    """
    try:
        return await RequestService(db).update_received(
            request_id, item_id, update.quantity_received
        )
    except (RequestNotFoundError, RequestItemNotFoundError) as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@ROUTER.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_request(
    request_id: str,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete an aid request.

    Args:
        request_id (str): The ID of the aid request.
        db (AsyncSession): The database session.
    """
    try:
        await RequestService(db).delete_request(request_id)
    except RequestNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
