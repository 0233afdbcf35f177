from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .message import Message


class StreamName(BaseModel):
    """Immutable, non-empty identifier of an event stream.

    Examples:
        >>> name = StreamName("user-42")
        >>> str(name)
        'user-42'
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(min_length=1)

    def __init__(self, value: str, **data: Any):
        super().__init__(value=value, **data)

    def __str__(self) -> str:
        return self.value


class Stream(BaseModel):
    """A stream name together with the events and metadata to write to it.

    Attributes:
        stream_name: Name of the stream
        stream_events: Messages to write, in order
        metadata: Stream level metadata; written separately when non-empty
    """

    stream_name: StreamName
    stream_events: list[Message] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(
        cls,
        stream_name: StreamName,
        stream_events: Iterable[Message],
        metadata: dict[str, Any] | None = None,
    ) -> "Stream":
        """Build a stream from any iterable of messages."""
        return cls(
            stream_name=stream_name,
            stream_events=list(stream_events),
            metadata=metadata or {},
        )
