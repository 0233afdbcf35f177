"""Tests for HttpProjectionManager against a mocked server."""

import httpx
import pytest

from eventgate.domain import (
    EventStoreRuntimeError,
    NotAllowed,
    ProjectionNotFound,
    ProjectionStatus,
    UnsupportedOperationError,
)
from eventgate.integrations.http import HttpProjectionManager


def sent(route) -> httpx.Request:
    return route.calls.last.request


def status_client(status_code: int, reason_phrase: bytes) -> httpx.Client:
    """Client answering every request with the given status line."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, extensions={"reason_phrase": reason_phrase})

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "call",
    [
        lambda manager: manager.create_query(),
        lambda manager: manager.create_projection("users"),
        lambda manager: manager.create_read_model_projection("users", object()),
    ],
)
def test_create_operations_unsupported(router, projection_manager, call):
    """Test that creating queries and projections is not available."""
    route = router.route()

    with pytest.raises(UnsupportedOperationError, match="HttpProjectionManager"):
        call(projection_manager)

    assert not route.called


@pytest.mark.parametrize(("flag", "segment"), [(True, "true"), (False, "false")])
def test_delete_projection(router, projection_manager, flag, segment):
    """Test that the emitted-events flag is a path segment."""
    route = router.route().mock(return_value=httpx.Response(204))

    projection_manager.delete_projection("user overview", flag)

    assert sent(route).method == "POST"
    assert str(sent(route).url) == (
        f"http://localhost:8080/projection/delete/user+overview/{segment}"
    )


@pytest.mark.parametrize(
    ("method_name", "action"),
    [("reset_projection", "reset"), ("stop_projection", "stop")],
)
def test_control_projection(router, projection_manager, method_name, action):
    """Test reset and stop requests."""
    route = router.route().mock(return_value=httpx.Response(204))

    getattr(projection_manager, method_name)("users")

    assert sent(route).method == "POST"
    assert str(sent(route).url) == f"http://localhost:8080/projection/{action}/users"


@pytest.mark.parametrize(
    "call",
    [
        lambda manager: manager.delete_projection("users", True),
        lambda manager: manager.reset_projection("users"),
        lambda manager: manager.stop_projection("users"),
        lambda manager: manager.fetch_projection_status("users"),
        lambda manager: manager.fetch_projection_stream_positions("users"),
        lambda manager: manager.fetch_projection_state("users"),
    ],
)
def test_projection_not_found(router, projection_manager, call):
    """Test that a 404 names the missing projection."""
    router.route().mock(return_value=httpx.Response(404))

    with pytest.raises(ProjectionNotFound) as exc_info:
        call(projection_manager)

    assert exc_info.value.name == "users"


@pytest.mark.parametrize("status_code", [403, 405])
@pytest.mark.parametrize(
    "call",
    [
        lambda manager: manager.delete_projection("users", False),
        lambda manager: manager.reset_projection("users"),
        lambda manager: manager.stop_projection("users"),
        lambda manager: manager.fetch_projection_names(None),
        lambda manager: manager.fetch_projection_names_regex("u.*"),
        lambda manager: manager.fetch_projection_status("users"),
        lambda manager: manager.fetch_projection_stream_positions("users"),
        lambda manager: manager.fetch_projection_state("users"),
    ],
)
def test_forbidden_statuses_raise_not_allowed(router, projection_manager, call, status_code):
    """Test that 403 and 405 map to NotAllowed for every operation."""
    router.route().mock(return_value=httpx.Response(status_code))

    with pytest.raises(NotAllowed):
        call(projection_manager)


def test_control_unknown_status(router, projection_manager):
    """Test that other statuses raise EventStoreRuntimeError."""
    router.route().mock(return_value=httpx.Response(200))

    with pytest.raises(EventStoreRuntimeError, match="Unknown error occurred"):
        projection_manager.stop_projection("users")


def test_fetch_projection_names_default(router, projection_manager):
    """Test the listing path and default pagination."""
    route = router.route().mock(return_value=httpx.Response(200, json=["users"]))

    assert projection_manager.fetch_projection_names(None) == ["users"]
    assert sent(route).method == "GET"
    assert sent(route).headers["Accept"] == "application/json"
    assert str(sent(route).url) == "http://localhost:8080/projections?limit=20&offset=0"


def test_fetch_projection_names_with_filter(router, projection_manager):
    """Test that the filter is one encoded segment."""
    route = router.route().mock(return_value=httpx.Response(200, json=[]))

    projection_manager.fetch_projection_names("user/overview", 5, 15)

    assert str(sent(route).url) == (
        "http://localhost:8080/projections/user%2Foverview?limit=5&offset=15"
    )


def test_fetch_projection_names_regex(router, projection_manager):
    """Test listing by pattern."""
    route = router.route().mock(return_value=httpx.Response(200, json=["users"]))

    assert projection_manager.fetch_projection_names_regex("users") == ["users"]
    assert str(sent(route).url) == (
        "http://localhost:8080/projections-regex/users?limit=20&offset=0"
    )


@pytest.mark.parametrize(
    ("reason_phrase", "expected"),
    [
        (b"RUNNING", ProjectionStatus.RUNNING),
        (b"idle", ProjectionStatus.IDLE),
        (b"DELETING_INCL_EMITTED_EVENTS", ProjectionStatus.DELETING_INCL_EMITTED_EVENTS),
    ],
)
def test_fetch_projection_status_from_reason_phrase(request_factory, reason_phrase, expected):
    """Test that the status is read from the reason phrase."""
    with status_client(200, reason_phrase) as client:
        manager = HttpProjectionManager(client, request_factory)

        assert manager.fetch_projection_status("users") is expected


def test_fetch_projection_status_unknown_phrase(request_factory):
    """Test that an unrecognized reason phrase raises EventStoreRuntimeError."""
    with status_client(200, b"OK") as client:
        manager = HttpProjectionManager(client, request_factory)

        with pytest.raises(EventStoreRuntimeError) as exc_info:
            manager.fetch_projection_status("users")

    assert exc_info.value.reason_phrase == "OK"


def test_fetch_projection_status_request(router, projection_manager):
    """Test the status request itself."""
    route = router.route().mock(return_value=httpx.Response(404))

    with pytest.raises(ProjectionNotFound):
        projection_manager.fetch_projection_status("user overview")

    assert sent(route).method == "GET"
    assert str(sent(route).url) == "http://localhost:8080/projection/status/user+overview"


def test_fetch_projection_stream_positions(router, projection_manager):
    """Test that stream positions are decoded from the body."""
    route = router.route().mock(
        return_value=httpx.Response(200, json={"user-1": 4, "user-2": 9})
    )

    positions = projection_manager.fetch_projection_stream_positions("users")

    assert positions == {"user-1": 4, "user-2": 9}
    assert str(sent(route).url) == "http://localhost:8080/projection/stream-positions/users"


def test_fetch_projection_state(router, projection_manager):
    """Test that state is decoded from the body."""
    route = router.route().mock(return_value=httpx.Response(200, json={"count": 3}))

    assert projection_manager.fetch_projection_state("users") == {"count": 3}
    assert sent(route).headers["Accept"] == "application/json"
    assert str(sent(route).url) == "http://localhost:8080/projection/state/users"


def test_fetch_projection_state_invalid_json(router, projection_manager):
    """Test that a malformed body raises EventStoreRuntimeError."""
    router.route().mock(return_value=httpx.Response(200, content=b"state"))

    with pytest.raises(EventStoreRuntimeError, match="Could not json decode response"):
        projection_manager.fetch_projection_state("users")


def test_dot_projection_name_stays_in_path(router, projection_manager):
    """Test that dot-only projection names are not resolved as path steps."""
    route = router.route().mock(return_value=httpx.Response(204))

    projection_manager.reset_projection("..")

    assert str(sent(route).url) == "http://localhost:8080/projection/reset/%2E%2E"
