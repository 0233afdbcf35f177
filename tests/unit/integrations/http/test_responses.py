"""Tests for JSON bodies and status mapping."""

import logging

import httpx
import pytest

from eventgate.domain import (
    EventStoreRuntimeError,
    InvalidArgumentError,
    NotAllowed,
    ProjectionNotFound,
)
from eventgate.integrations.http.responses import decode_json, encode_json, raise_for_status

REQUEST = httpx.Request("GET", "http://localhost:8080/projections")


def test_encode_json_keeps_unicode():
    """Test that non-ASCII text is written as UTF-8, not escaped."""
    assert encode_json({"name": "Zoë"}, "Metadata") == '{"name": "Zoë"}'.encode()


@pytest.mark.parametrize("data", [{"a": object()}, {"a": float("inf")}, {"a": "\ud800"}])
def test_encode_json_rejects_unencodable(data):
    """Test that unencodable values raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match="Metadata could not be json encoded"):
        encode_json(data, "Metadata")


def test_decode_json():
    assert decode_json(httpx.Response(200, json={"a": [1, 2]})) == {"a": [1, 2]}


def test_decode_json_invalid():
    """Test that the error carries the response status."""
    with pytest.raises(EventStoreRuntimeError) as exc_info:
        decode_json(httpx.Response(200, content=b"{"))

    assert exc_info.value.status_code == 200
    assert exc_info.value.reason_phrase == "OK"


@pytest.mark.parametrize("status_code", [403, 405])
def test_raise_for_status_not_allowed(status_code):
    """Test that 403 and 405 win over the not-found mapping."""
    with pytest.raises(NotAllowed) as exc_info:
        raise_for_status(
            REQUEST, httpx.Response(status_code), not_found=lambda: ProjectionNotFound("x")
        )

    assert exc_info.value.status_code == status_code


def test_raise_for_status_not_found():
    """Test that 404 uses the operation's not-found error."""
    with pytest.raises(ProjectionNotFound):
        raise_for_status(REQUEST, httpx.Response(404), not_found=lambda: ProjectionNotFound("x"))


def test_raise_for_status_unknown(caplog):
    """Test that other statuses are logged and raised as runtime errors."""
    with caplog.at_level(logging.WARNING), pytest.raises(EventStoreRuntimeError) as exc_info:
        raise_for_status(REQUEST, httpx.Response(404))

    assert exc_info.value.status_code == 404
    assert exc_info.value.reason_phrase == "Not Found"
    record = caplog.records[-1]
    assert record.getMessage() == "Unexpected response"
    assert record.url == "http://localhost:8080/projections"
    assert record.status_code == 404
