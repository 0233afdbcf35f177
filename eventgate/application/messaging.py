"""Message factory and converter contracts with their default implementations.

The event store adapters never serialize messages themselves:
- MessageConverter flattens a message into a plain dict before it is encoded
- MessageFactory rebuilds a message from its name and a decoded record
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from ..domain import InvalidArgumentError, Message
from .type_loader import load_type


class MessageFactory(ABC):
    """Rebuilds messages from decoded records."""

    @abstractmethod
    def create_message(self, message_name: str, record: dict[str, Any]) -> Message:
        """Create a message from its stored name and record.

        Args:
            message_name: Name the message was stored under
            record: Decoded record; ``created_at`` is already a datetime

        Returns:
            The rebuilt message
        """
        ...


class MessageConverter(ABC):
    """Flattens messages into plain records."""

    @abstractmethod
    def convert_to_dict(self, message: Message) -> dict[str, Any]:
        """Convert a message into a flat record.

        The record must carry ``created_at`` as a datetime; the adapter
        formats it for the wire.
        """
        ...


class ClassPathMessageFactory(MessageFactory):
    """Treats message names as fully qualified class names.

    This is the counterpart of Message's default naming: a message stored as
    ``myapp.events.UserRegistered`` is rebuilt as an instance of that class.

    Examples:
        >>> factory = ClassPathMessageFactory()
        >>> message = factory.create_message(
        ...     "myapp.events.UserRegistered",
        ...     {"payload": {"email": "alice@example.com"}, "created_at": now},
        ... )
    """

    def create_message(self, message_name: str, record: dict[str, Any]) -> Message:
        try:
            message_class = load_type(message_name)
        except ImportError as err:
            raise InvalidArgumentError(
                f"Given message name is not a valid class: {message_name}"
            ) from err

        if not issubclass(message_class, Message):
            raise InvalidArgumentError(
                f"Message class {message_name} is not a subclass of {Message.__name__}"
            )

        try:
            return message_class.model_validate({**record, "message_name": message_name})
        except ValidationError as err:
            raise InvalidArgumentError(
                f"Record could not be converted into {message_name}: {err}"
            ) from err


class DefaultMessageConverter(MessageConverter):
    """Converts a message into the record layout the server stores."""

    def convert_to_dict(self, message: Message) -> dict[str, Any]:
        return {
            "uuid": str(message.uuid),
            "message_name": message.message_name,
            "payload": message.payload,
            "metadata": message.metadata,
            "created_at": message.created_at,
        }
