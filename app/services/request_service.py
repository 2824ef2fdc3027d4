"""Request service - business logic for aid request operations."""

import logging
import typing as t
import uuid

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import AidItem, AidRequest, RequestStatus
from app.schemas.aid_request import (
    AidRequestCreate,
    AidRequestListResponse,
    AidRequestResponse,
    ReceivedQuantityResult,
)
from app.schemas.statistics import DashboardStats
from app.services.aggregator import aggregate
from app.services.keyword_service import KeywordService
from app.services.status_deriver import derive_status, set_received
from app.utils.dates import now_ms

LOGGER: logging.Logger = logging.getLogger(__name__)


class RequestNotFoundError(Exception):
    """Raised when a request is not found."""

    def __init__(self, request_id: str) -> None:
        self.request_id = request_id
        super().__init__(f"Aid request with ID {request_id} not found")


class RequestItemNotFoundError(Exception):
    """Raised when an item is not part of the given request."""

    def __init__(self, request_id: str, item_id: str) -> None:
        self.request_id = request_id
        self.item_id = item_id
        super().__init__(
            f"Item {item_id} not found in aid request {request_id}"
        )


def new_request_id() -> str:
    """Generate a globally unique request ID."""
    return f"req_{uuid.uuid4().hex}"


def new_item_id() -> str:
    """Generate an item ID, unique within its request."""
    return uuid.uuid4().hex[:12]


class RequestService:
    """Service class for aid request operations."""

    db: AsyncSession

    def __init__(self, db: AsyncSession) -> None:
        """Initialize RequestService.

        Args:
            db (AsyncSession): The database session.
        """
        self.db = db

    @staticmethod
    def convert_request_to_response(
        request: AidRequest,
    ) -> AidRequestResponse:
        """Convert AidRequest model to AidRequestResponse schema.

        Args:
            request (AidRequest): The aid request model.

        Returns:
            AidRequestResponse: The aid request response schema.
        """
        return AidRequestResponse.model_validate(request)

    async def get_request_model(self, request_id: str) -> AidRequest:
        """Get the raw AidRequest model by ID.

        Args:
            request_id (str): The ID of the aid request.

        Returns:
            AidRequest: The aid request model, items loaded.
        """
        request: AidRequest | None = (
            await self.db.execute(
                select(AidRequest).where(AidRequest.id == request_id)
            )
        ).scalar_one_or_none()

        if request is None:
            raise RequestNotFoundError(request_id)

        return request

    async def get_request(self, request_id: str) -> AidRequestResponse:
        """Get a specific aid request by ID.

        Args:
            request_id (str): The ID of the aid request.

        Returns:
            AidRequestResponse: The aid request response schema.
        """
        return self.convert_request_to_response(
            await self.get_request_model(request_id)
        )

    async def list_all(self) -> t.List[AidRequestResponse]:
        """Load every request, oldest first.

        Returns:
            List[AidRequestResponse]: The full request collection.
        """
        requests: t.Sequence[AidRequest] = (
            (
                await self.db.execute(
                    select(AidRequest).order_by(
                        AidRequest.created_at, AidRequest.id
                    )
                )
            )
            .scalars()
            .all()
        )
        return [self.convert_request_to_response(r) for r in requests]

    async def list_requests(
        self,
        location: str | None = None,
        request_status: RequestStatus | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> AidRequestListResponse:
        """List aid requests with optional filters and pagination.

        Args:
            location (str | None):
                Optional exact location filter.
            request_status (RequestStatus | None):
                Optional status filter.
            page (int):
                Page number for pagination.
            page_size (int):
                Number of requests per page.

        Returns:
            AidRequestListResponse: The paginated list, newest first.
        """
        query: Select[t.Tuple[AidRequest]] = select(AidRequest)

        if location is not None:
            query = query.where(AidRequest.location == location)

        if request_status is not None:
            query = query.where(AidRequest.status == request_status)

        count_query: Select[t.Tuple[int]] = select(
            func.count()  # pylint: disable=not-callable
        ).select_from(query.subquery())
        total: int = (await self.db.execute(count_query)).scalar() or 0

        offset: int = (page - 1) * page_size
        query = (
            query.order_by(AidRequest.created_at.desc(), AidRequest.id)
            .offset(offset)
            .limit(page_size)
        )
        requests: t.Sequence[AidRequest] = (
            (await self.db.execute(query)).scalars().all()
        )

        total_pages: int = (
            (total + page_size - 1) // page_size if total > 0 else 1
        )

        return AidRequestListResponse(
            requests=[self.convert_request_to_response(r) for r in requests],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
        )

    async def find_by_nic(self, nic: str) -> t.List[AidRequestResponse]:
        """Find every request filed under an identity number.

        Args:
            nic (str): The NIC, matched case-insensitively.

        Returns:
            List[AidRequestResponse]: Matching requests, oldest first.
        """
        requests: t.Sequence[AidRequest] = (
            (
                await self.db.execute(
                    select(AidRequest)
                    .where(func.lower(AidRequest.nic) == nic.strip().lower())
                    .order_by(AidRequest.created_at, AidRequest.id)
                )
            )
            .scalars()
            .all()
        )
        return [self.convert_request_to_response(r) for r in requests]

    async def list_active(
        self, location: str | None = None
    ) -> t.List[AidRequestResponse]:
        """List requests that are not yet fulfilled, newest first.

        Args:
            location (str | None): Optional exact location filter.

        Returns:
            List[AidRequestResponse]: The live feed of open requests.
        """
        query: Select[t.Tuple[AidRequest]] = select(AidRequest).where(
            AidRequest.status != RequestStatus.FULFILLED
        )
        if location is not None:
            query = query.where(AidRequest.location == location)

        requests: t.Sequence[AidRequest] = (
            (
                await self.db.execute(
                    query.order_by(
                        AidRequest.created_at.desc(), AidRequest.id
                    )
                )
            )
            .scalars()
            .all()
        )
        return [self.convert_request_to_response(r) for r in requests]

    async def create_request(
        self,
        data: AidRequestCreate,
        created_at: int | None = None,
    ) -> AidRequestResponse:
        """Create a new aid request.

        Args:
            data (AidRequestCreate): The validated submission.
            created_at (int | None):
                Creation time in epoch milliseconds; defaults to now.

        Returns:
            AidRequestResponse: The created aid request response schema.
        """
        timestamp: int = created_at if created_at is not None else now_ms()

        new_request: AidRequest = AidRequest(
            id=new_request_id(),
            nic=data.nic,
            full_name=data.full_name,
            contact_number=data.contact_number,
            extra_contact_number=data.extra_contact_number,
            location=data.location,
            notes=data.notes or None,
            created_at=timestamp,
            updated_at=timestamp,
            items=[
                AidItem(
                    id=new_item_id(),
                    position=position,
                    name=item.name,
                    category=item.category,
                    quantity_needed=item.quantity_needed,
                    quantity_received=0,
                    unit=item.unit,
                    keywords=list(item.keywords),
                )
                for position, item in enumerate(data.items)
            ],
        )
        # Nothing is received yet, so this is always Pending.
        new_request.status = derive_status(new_request)

        self.db.add(new_request)
        await self.db.flush()

        LOGGER.info(
            "Created aid request %s with %d item(s) at %s",
            new_request.id,
            len(new_request.items),
            new_request.location,
        )
        return self.convert_request_to_response(new_request)

    async def update_received(
        self, request_id: str, item_id: str, quantity: t.Any
    ) -> ReceivedQuantityResult:
        """Record how much of an item has been received.

        The quantity is clamped into ``[0, quantity_needed]``; the request's
        status is recomputed and its ``updated_at`` refreshed.

        Args:
            request_id (str): The ID of the aid request.
            item_id (str): The ID of the item within the request.
            quantity (Any): The submitted received quantity.

        Returns:
            ReceivedQuantityResult: The stored quantity and new status.
        """
        request: AidRequest = await self.get_request_model(request_id)

        item: AidItem | None = next(
            (i for i in request.items if i.id == item_id), None
        )
        if item is None:
            raise RequestItemNotFoundError(request_id, item_id)

        received, new_status = set_received(request, item, quantity)
        await self.db.flush()

        LOGGER.info(
            "Request %s item %s received %d/%d, status %s",
            request_id,
            item_id,
            received,
            item.quantity_needed,
            new_status.value,
        )
        return ReceivedQuantityResult(
            request_id=request.id,
            item_id=item.id,
            quantity_received=received,
            status=new_status,
            updated_at=request.updated_at,
        )

    async def delete_request(self, request_id: str) -> None:
        """Delete an aid request and its items.

        Args:
            request_id (str): The ID of the aid request to delete.
        """
        request: AidRequest = await self.get_request_model(request_id)
        await self.db.delete(request)
        await self.db.flush()
        LOGGER.info("Deleted aid request %s", request_id)

    async def count_requests(self) -> int:
        """Count stored requests."""
        return (
            await self.db.execute(
                select(func.count()).select_from(  # pylint: disable=not-callable
                    AidRequest
                )
            )
        ).scalar() or 0

    async def get_dashboard_stats(self) -> DashboardStats:
        """Aggregate every request using the stored ignored keywords.

        Returns:
            DashboardStats: The dashboard snapshot.
        """
        requests: t.List[AidRequestResponse] = await self.list_all()
        ignored: t.List[str] = await KeywordService(
            self.db
        ).get_ignored_keywords()
        return aggregate(requests, ignored)
