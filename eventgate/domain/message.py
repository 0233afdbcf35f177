from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import InvalidArgumentError

# Microseconds, no timezone suffix; always read back as UTC.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def get_qualified_name(cls: type) -> str:
    """Get the fully qualified name of a class.

    Args:
        cls: The class to get the qualified name for.

    Returns:
        The fully qualified name (module.ClassName).

    Example:
        >>> get_qualified_name(Message)
        'eventgate.domain.message.Message'
    """
    return f"{cls.__module__}.{cls.__qualname__}"


def utc_now() -> datetime:
    """Get the current UTC timestamp.

    Returns:
        Current datetime with UTC timezone information
    """
    return datetime.now(tz=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the event store wire format.

    Aware datetimes are converted to UTC first; naive datetimes are taken
    to already be in UTC.

    Examples:
        >>> format_timestamp(datetime(2017, 3, 1, 12, 30, 5, 42, tzinfo=timezone.utc))
        '2017-03-01T12:30:05.000042'
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse a wire format timestamp into an aware UTC datetime.

    Raises:
        ValueError: If the value does not match TIMESTAMP_FORMAT
        TypeError: If the value is not a string
    """
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


class Message(BaseModel):
    """A named, timestamped record stored in an event stream.

    Concrete domain events subclass Message. Unless given explicitly, the
    message name is the fully qualified name of the concrete class, which is
    what ClassPathMessageFactory uses to rebuild the message when it is
    loaded back from the server.

    Attributes:
        uuid: Unique identifier of this message
        message_name: Name the message is stored under
        payload: Message body
        metadata: Flat mapping of metadata keys to scalar values
        created_at: When the message was created (UTC)

    Examples:
        >>> class UserRegistered(Message):
        ...     pass
        >>> event = UserRegistered(payload={"email": "alice@example.com"})
        >>> event = event.with_added_metadata("_aggregate_version", 1)
    """

    model_config = ConfigDict(frozen=True)

    uuid: UUID = Field(default_factory=uuid4)
    message_name: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="before")
    @classmethod
    def _default_message_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("message_name"):
            data = {**data, "message_name": get_qualified_name(cls)}
        return data

    def with_added_metadata(self, key: str, value: Any) -> "Message":
        """Return a copy of this message with one more metadata entry."""
        if not key:
            raise InvalidArgumentError("Metadata key must not be empty")
        return self.model_copy(update={"metadata": {**self.metadata, key: value}})
