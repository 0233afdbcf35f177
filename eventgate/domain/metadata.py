"""Metadata matchers used to filter events when loading or listing streams.

A MetadataMatcher is an ordered sequence of match clauses. The order matters:
the HTTP adapter numbers the clauses by position when it renders them into a
query string.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidArgumentError


class FieldType(str, Enum):
    """Whether a clause targets event metadata or a built-in message property."""

    METADATA = "metadata"
    MESSAGE_PROPERTY = "message_property"


class Operator(str, Enum):
    """Comparison operators understood by the event store server.

    The server receives the operator *name* (e.g. ``GREATER_THAN``).
    """

    EQUALS = "="
    GREATER_THAN = ">"
    GREATER_THAN_EQUALS = ">="
    IN = "in"
    LOWER_THAN = "<"
    LOWER_THAN_EQUALS = "<="
    NOT_EQUALS = "!="
    NOT_IN = "nin"
    REGEX = "regex"


class MetadataMatch(BaseModel):
    """A single match clause."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    operator: Operator
    value: Any
    field_type: FieldType = FieldType.METADATA


class MetadataMatcher(BaseModel):
    """Immutable, ordered collection of match clauses.

    Examples:
        >>> matcher = (
        ...     MetadataMatcher()
        ...     .with_metadata_match("_aggregate_type", Operator.EQUALS, "user")
        ...     .with_metadata_match(
        ...         "message_name",
        ...         Operator.IN,
        ...         ["UserRegistered", "UserRenamed"],
        ...         FieldType.MESSAGE_PROPERTY,
        ...     )
        ... )
        >>> len(matcher)
        2
    """

    model_config = ConfigDict(frozen=True)

    matches: tuple[MetadataMatch, ...] = ()

    def with_metadata_match(
        self,
        field: str,
        operator: Operator,
        value: Any,
        field_type: FieldType = FieldType.METADATA,
    ) -> "MetadataMatcher":
        """Return a new matcher with one more clause appended.

        Raises:
            InvalidArgumentError: If the value does not suit the operator
        """
        _validate_value(operator, value)
        match = MetadataMatch(field=field, operator=operator, value=value, field_type=field_type)
        return MetadataMatcher(matches=(*self.matches, match))

    def __len__(self) -> int:
        return len(self.matches)


def _validate_value(operator: Operator, value: Any) -> None:
    if operator in (Operator.IN, Operator.NOT_IN):
        if not isinstance(value, (list, tuple)):
            raise InvalidArgumentError(f"Value must be a list for operator {operator.name}")
        return

    if operator is Operator.REGEX:
        if not isinstance(value, str):
            raise InvalidArgumentError("Value must be a string for the REGEX operator")
        return

    if not isinstance(value, (str, int, float, bool)):
        raise InvalidArgumentError(f"Value must be a scalar for operator {operator.name}")
