"""Event store contract.

EventStore is what application code programs against; adapters such as
HttpEventStore implement it for a particular backend.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

from ..domain import Message, MetadataMatcher, Stream, StreamName


class EventStore(ABC):
    """Abstract interface for stream storage.

    Streams are named, ordered sequences of messages with optional
    stream-level metadata. Event numbers start at 1.
    """

    @abstractmethod
    def create(self, stream: Stream) -> None:
        """Create a stream and write its events and metadata."""
        ...

    @abstractmethod
    def append_to(self, stream_name: StreamName, stream_events: Iterable[Message]) -> None:
        """Append events to a stream."""
        ...

    @abstractmethod
    def delete(self, stream_name: StreamName) -> None:
        """Delete a stream.

        Raises:
            StreamNotFound: If the stream does not exist
        """
        ...

    @abstractmethod
    def update_stream_metadata(
        self, stream_name: StreamName, new_metadata: dict[str, Any]
    ) -> None:
        """Replace the metadata of a stream.

        Raises:
            StreamNotFound: If the stream does not exist
        """
        ...

    @abstractmethod
    def fetch_stream_metadata(self, stream_name: StreamName) -> dict[str, Any]:
        """Get the metadata of a stream.

        Raises:
            StreamNotFound: If the stream does not exist
        """
        ...

    @abstractmethod
    def has_stream(self, stream_name: StreamName) -> bool:
        """Check whether a stream exists."""
        ...

    @abstractmethod
    def load(
        self,
        stream_name: StreamName,
        from_number: int = 1,
        count: int | None = None,
        metadata_matcher: MetadataMatcher | None = None,
    ) -> Iterator[Message]:
        """Load events from a stream, oldest first.

        Args:
            stream_name: Stream to read
            from_number: First event number to return (inclusive)
            count: Maximum number of events, or None for all of them
            metadata_matcher: Optional filter on metadata and message properties
        """
        ...

    @abstractmethod
    def load_reverse(
        self,
        stream_name: StreamName,
        from_number: int | None = None,
        count: int | None = None,
        metadata_matcher: MetadataMatcher | None = None,
    ) -> Iterator[Message]:
        """Load events from a stream, newest first.

        Args:
            stream_name: Stream to read
            from_number: First event number to return, or None for the newest
            count: Maximum number of events, or None for all of them
            metadata_matcher: Optional filter on metadata and message properties
        """
        ...

    @abstractmethod
    def fetch_stream_names(
        self,
        name_filter: str | None,
        metadata_matcher: MetadataMatcher | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[str]:
        """List stream names, optionally restricted to an exact name."""
        ...

    @abstractmethod
    def fetch_stream_names_regex(
        self,
        regex: str,
        metadata_matcher: MetadataMatcher | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[str]:
        """List stream names matching a regular expression."""
        ...

    @abstractmethod
    def fetch_category_names(
        self, name_filter: str | None, limit: int = 20, offset: int = 0
    ) -> list[str]:
        """List stream categories, optionally restricted to an exact name."""
        ...

    @abstractmethod
    def fetch_category_names_regex(
        self, regex: str, limit: int = 20, offset: int = 0
    ) -> list[str]:
        """List stream categories matching a regular expression."""
        ...
