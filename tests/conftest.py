"""
Pytest configuration and fixtures.
"""

import asyncio
import itertools
import os
import tempfile
import typing as t
from pathlib import Path
from types import SimpleNamespace

import pytest

# Configure the application before it is imported
_DB_DIR = Path(tempfile.mkdtemp(prefix="aidconnect-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["GROQ_API_KEY"] = ""

from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import close_db, reset_db  # noqa: E402
from app.core.models import AidCategory, RequestStatus  # noqa: E402
from app.main import APPLICATION  # noqa: E402
from app.schemas.aid_request import (  # noqa: E402
    AidItemResponse,
    AidRequestResponse,
)
from app.services.status_deriver import derive_status  # noqa: E402


async def _fresh_database() -> None:
    await reset_db()
    await close_db()


@pytest.fixture
def client() -> t.Iterator[TestClient]:
    """Test client over an empty database."""
    asyncio.run(_fresh_database())
    with TestClient(APPLICATION) as test_client:
        yield test_client
    APPLICATION.dependency_overrides.clear()


@pytest.fixture
def make_item() -> t.Callable[..., AidItemResponse]:
    """Factory for items; IDs are sequential per test."""
    counter = itertools.count(1)

    def factory(
        needed: int = 10,
        received: int = 0,
        category: AidCategory = AidCategory.FOOD,
        keywords: t.List[str] | None = None,
        name: str = "Rice",
    ) -> AidItemResponse:
        return AidItemResponse(
            id=f"i{next(counter)}",
            name=name,
            category=category,
            quantity_needed=needed,
            quantity_received=received,
            unit="kg",
            keywords=keywords or [],
        )

    return factory


@pytest.fixture
def make_request() -> t.Callable[..., AidRequestResponse]:
    """Factory for requests; status is derived unless given."""
    counter = itertools.count(1)

    def factory(
        items: t.List[AidItemResponse],
        location: str = "Colombo - Dehiwala",
        status: RequestStatus | None = None,
        nic: str = "900010001V",
    ) -> AidRequestResponse:
        number: int = next(counter)
        request = AidRequestResponse(
            id=f"req_{number}",
            nic=nic,
            full_name="Test Person",
            contact_number="0771234567",
            location=location,
            items=items,
            status=RequestStatus.PENDING,
            created_at=1_700_000_000_000 + number,
            updated_at=1_700_000_000_000 + number,
        )
        request.status = status if status is not None else derive_status(
            request
        )
        return request

    return factory


@pytest.fixture
def sample_submission() -> t.Dict[str, t.Any]:
    """Valid request submission payload."""
    return {
        "nic": "900010001V",
        "full_name": "Sarah Connor",
        "contact_number": "077 123 4567",
        "district": "Colombo",
        "region": "Dehiwala",
        "notes": "Family of four",
        "items": [
            {
                "name": "Water Bottles",
                "category": "Water",
                "quantity_needed": 20,
                "unit": "liters",
                "keywords": ["Drinking Water", "Bottled", "Hydration"],
            },
            {
                "name": "Rice",
                "category": "Food",
                "quantity_needed": 10,
                "unit": "kg",
                "keywords": ["Dry Rations", "Staple Food"],
            },
        ],
    }


class FakeCompletions:
    """Stands in for ``client.chat.completions`` with canned replies.

    A reply of None produces a response without choices.
    """

    def __init__(self, replies: t.List[t.Any]) -> None:
        self.replies = list(replies)
        self.calls: t.List[t.Dict[str, t.Any]] = []

    async def create(self, **kwargs: t.Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_ai() -> t.Callable[..., SimpleNamespace]:
    """Factory for a fake Groq client returning the given replies in order."""

    def factory(*replies: t.Any) -> SimpleNamespace:
        completions = FakeCompletions(list(replies))
        return SimpleNamespace(chat=SimpleNamespace(completions=completions))

    return factory
