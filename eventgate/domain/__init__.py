"""Domain primitives shared by event store clients.

- Message: Base class for stored events
- StreamName / Stream: Stream identifiers and write batches
- MetadataMatcher: Ordered filter clauses for loads and listings
- ProjectionStatus: Lifecycle status of a server-side projection
- Exceptions: The error taxonomy every adapter raises
"""

from .exceptions import (
    EventStoreError,
    EventStoreRuntimeError,
    InvalidArgumentError,
    NotAllowed,
    ProjectionNotFound,
    StreamNotFound,
    UnsupportedOperationError,
)
from .message import (
    TIMESTAMP_FORMAT,
    Message,
    format_timestamp,
    get_qualified_name,
    parse_timestamp,
    utc_now,
)
from .metadata import FieldType, MetadataMatch, MetadataMatcher, Operator
from .projection import ProjectionStatus
from .stream import Stream, StreamName

__all__ = [
    # Messages
    "Message",
    "TIMESTAMP_FORMAT",
    "format_timestamp",
    "get_qualified_name",
    "parse_timestamp",
    "utc_now",
    # Streams
    "Stream",
    "StreamName",
    # Metadata matching
    "FieldType",
    "MetadataMatch",
    "MetadataMatcher",
    "Operator",
    # Projections
    "ProjectionStatus",
    # Errors
    "EventStoreError",
    "EventStoreRuntimeError",
    "InvalidArgumentError",
    "NotAllowed",
    "ProjectionNotFound",
    "StreamNotFound",
    "UnsupportedOperationError",
]
