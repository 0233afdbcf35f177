"""Exceptions raised by event store and projection manager adapters.

Every error derives from EventStoreError and also from the closest builtin
exception, so callers can catch either the library-specific type or the
generic one (e.g. ``LookupError`` for both not-found errors).
"""


class EventStoreError(Exception):
    """Base class for all eventgate errors."""

    pass


class InvalidArgumentError(EventStoreError, ValueError):
    """Raised when input cannot be used, e.g. it cannot be encoded as JSON.

    Raised before any request is sent to the server.
    """

    pass


class StreamNotFound(EventStoreError, LookupError):
    """Raised when the server reports that a stream does not exist."""

    def __init__(self, stream_name: object):
        self.stream_name = str(stream_name)
        super().__init__(f'A stream with name "{self.stream_name}" could not be found')


class ProjectionNotFound(EventStoreError, LookupError):
    """Raised when the server reports that a projection does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'A projection with name "{name}" could not be found')


class NotAllowed(EventStoreError, PermissionError):
    """Raised when the server forbids an operation (HTTP 403 or 405)."""

    def __init__(self, status_code: int | None = None):
        self.status_code = status_code
        super().__init__("The operation is not allowed by the event store server")


class UnsupportedOperationError(EventStoreError, NotImplementedError):
    """Raised for operations this transport never supports."""

    pass


class EventStoreRuntimeError(EventStoreError, RuntimeError):
    """Raised for any other failure reported by the server or its response.

    Attributes:
        status_code: HTTP status code of the response, when there was one
        reason_phrase: Reason phrase of the response, when there was one
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason_phrase: str | None = None,
    ):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(message)
