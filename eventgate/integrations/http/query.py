"""Path and query-string construction for the HTTP adapters."""

from typing import Any
from urllib.parse import quote_plus

from ...domain import FieldType, MetadataMatcher

# Stands in for "no upper bound" in load paths
MAX_COUNT = 2**63 - 1


def encode_segment(value: object) -> str:
    """Form-encode a value for use as a single path segment.

    Segments made only of dots are escaped as well, so they cannot be
    resolved as relative path steps.

    Examples:
        >>> encode_segment("user/42 admin")
        'user%2F42+admin'
        >>> encode_segment("..")
        '%2E%2E'
    """
    encoded = quote_plus(str(value))
    if encoded and not encoded.strip("."):
        return "%2E" * len(encoded)
    return encoded


def build_metadata_query(metadata_matcher: MetadataMatcher | None) -> str:
    """Render a matcher into query parameters, numbered by clause position.

    Each clause becomes three parameters sharing a ``meta_<i>_`` prefix
    (metadata fields) or ``property_<i>_`` prefix (message properties).
    Fields and values are form-encoded; list items are encoded one by one
    and joined with a literal comma.

    Examples:
        >>> matcher = MetadataMatcher().with_metadata_match("version", Operator.EQUALS, 2)
        >>> build_metadata_query(matcher)
        'meta_0_field=version&meta_0_operator=EQUALS&meta_0_value=2'
    """
    if metadata_matcher is None:
        return ""

    params = []
    for index, match in enumerate(metadata_matcher.matches):
        if match.field_type is FieldType.METADATA:
            prefix = f"meta_{index}_"
        else:
            prefix = f"property_{index}_"

        params.append(f"{prefix}field={quote_plus(match.field)}")
        params.append(f"{prefix}operator={match.operator.name}")
        params.append(f"{prefix}value={_format_value(match.value)}")

    return "&".join(params)


def build_pagination_query(limit: int, offset: int) -> str:
    return f"limit={limit}&offset={offset}"


def join_query(*parts: str) -> str:
    """Join query fragments with ``&``, skipping empty ones."""
    return "&".join(part for part in parts if part)


def with_query(path: str, query: str) -> str:
    """Attach a query string to a path, if there is one."""
    return f"{path}?{query}" if query else path


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote_plus(str(value))
