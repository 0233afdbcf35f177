"""Central test fixtures for the HTTP adapters."""

from collections.abc import Iterator
from datetime import datetime, timezone

import httpx
import pytest
import respx

from eventgate.application import ClassPathMessageFactory, DefaultMessageConverter
from eventgate.integrations.http import (
    HttpEventStore,
    HttpProjectionManager,
    HttpRequestFactory,
)
from tests.fixtures.messages import UserRegistered

BASE_URL = "http://localhost:8080/"


@pytest.fixture
def router() -> Iterator[respx.MockRouter]:
    """Mock all HTTP traffic; tests register their own routes."""
    with respx.mock(using="httpx", assert_all_called=False) as mock_router:
        yield mock_router


@pytest.fixture
def http_client() -> Iterator[httpx.Client]:
    """Create a plain httpx client."""
    with httpx.Client() as client:
        yield client


@pytest.fixture
def request_factory() -> HttpRequestFactory:
    """Create a request factory pointing at the test server."""
    return HttpRequestFactory(BASE_URL)


@pytest.fixture
def event_store(http_client, request_factory) -> HttpEventStore:
    """Create an HTTP event store with the default messaging."""
    return HttpEventStore(
        ClassPathMessageFactory(),
        DefaultMessageConverter(),
        http_client,
        request_factory,
    )


@pytest.fixture
def projection_manager(http_client, request_factory) -> HttpProjectionManager:
    """Create an HTTP projection manager."""
    return HttpProjectionManager(http_client, request_factory)


@pytest.fixture
def created_at() -> datetime:
    """A fixed creation time with microsecond precision."""
    return datetime(2017, 3, 1, 12, 30, 5, 123456, tzinfo=timezone.utc)


@pytest.fixture
def user_registered(created_at: datetime) -> UserRegistered:
    """Create a sample event."""
    return UserRegistered(
        payload={"email": "alice@example.com", "name": "Alice"},
        metadata={"_aggregate_id": "user-42", "_aggregate_version": 1},
        created_at=created_at,
    )
