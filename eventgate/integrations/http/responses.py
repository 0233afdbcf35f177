"""JSON bodies and status mapping shared by the HTTP adapters."""

import json
import logging
from collections.abc import Callable
from typing import Any, NoReturn

import httpx

from ...domain import EventStoreRuntimeError, InvalidArgumentError, NotAllowed

LOGGER = logging.getLogger(__name__)

NOT_ALLOWED_STATUSES = frozenset({403, 405})


def encode_json(data: Any, what: str) -> bytes:
    """Encode data as a UTF-8 JSON body.

    Args:
        data: Value to encode
        what: Description used in the error message (e.g. "Metadata")

    Raises:
        InvalidArgumentError: If the value cannot be represented as JSON
    """
    try:
        return json.dumps(data, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(f"{what} could not be json encoded") from err


def decode_json(response: httpx.Response) -> Any:
    """Decode a JSON response body.

    Raises:
        EventStoreRuntimeError: If the body is not valid JSON
    """
    try:
        return json.loads(response.content)
    except ValueError as err:
        raise EventStoreRuntimeError(
            "Could not json decode response",
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
        ) from err


def raise_for_status(
    request: httpx.Request,
    response: httpx.Response,
    not_found: Callable[[], Exception] | None = None,
) -> NoReturn:
    """Raise the error a non-success response maps to.

    Called once an operation has handled its own success statuses.
    403 and 405 always map to NotAllowed; 404 maps to ``not_found()`` when
    the operation knows what was missing; anything else is a generic failure.
    """
    status_code = response.status_code

    if status_code in NOT_ALLOWED_STATUSES:
        raise NotAllowed(status_code)

    if status_code == 404 and not_found is not None:
        raise not_found()

    LOGGER.warning(
        "Unexpected response",
        extra={
            "method": request.method,
            "url": str(request.url),
            "status_code": status_code,
            "reason_phrase": response.reason_phrase,
        },
    )
    raise EventStoreRuntimeError(
        "Unknown error occurred",
        status_code=status_code,
        reason_phrase=response.reason_phrase,
    )
