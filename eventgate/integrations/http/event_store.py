"""HTTP implementation of EventStore.

Each operation is translated into a request against the event store
server's REST API, and the response status is mapped onto a return value
or one of the errors in ``eventgate.domain.exceptions``.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from ...application import EventStore, MessageConverter, MessageFactory
from ...domain import (
    EventStoreRuntimeError,
    InvalidArgumentError,
    Message,
    MetadataMatcher,
    Stream,
    StreamName,
    StreamNotFound,
    format_timestamp,
    parse_timestamp,
)
from .adapter import HttpAdapter
from .query import (
    MAX_COUNT,
    build_metadata_query,
    build_pagination_query,
    encode_segment,
    join_query,
    with_query,
)
from .responses import decode_json, encode_json, raise_for_status
from .transport import (
    HttpClient,
    RequestFactory,
    RequestFactoryProvider,
    request_factory_from_client,
)

ATOM_JSON = "application/vnd.eventstore.atom+json"
JSON = "application/json"


class HttpEventStore(HttpAdapter, EventStore):
    """EventStore backed by a remote event store server over HTTP.

    The store holds no state besides its collaborators, so one instance can
    be shared by concurrent callers if the HTTP client allows it.

    Attributes:
        message_factory: Rebuilds loaded entries into messages
        message_converter: Flattens messages before they are sent
        http_client: Client used to send requests
        request_factory: Factory used to build requests

    Examples:
        >>> client = httpx.Client(base_url="http://localhost:8080/")
        >>> store = HttpEventStore(
        ...     ClassPathMessageFactory(),
        ...     DefaultMessageConverter(),
        ...     client,
        ... )
        >>> store.append_to(StreamName("user-42"), [UserRegistered(payload={...})])
        >>> for event in store.load(StreamName("user-42")):
        ...     print(event.message_name)
    """

    def __init__(
        self,
        message_factory: MessageFactory,
        message_converter: MessageConverter,
        http_client: HttpClient,
        request_factory: RequestFactory | None = None,
        *,
        default_request_factory: RequestFactoryProvider = request_factory_from_client,
    ):
        """Initialize the HTTP event store.

        Args:
            message_factory: Rebuilds loaded entries into messages
            message_converter: Flattens messages before they are sent
            http_client: Client used to send requests
            request_factory: Factory used to build requests; derived from
                the client's base URL when omitted
            default_request_factory: Fallback used when no request factory
                is given
        """
        super().__init__(http_client, request_factory, default_request_factory)
        self.message_factory = message_factory
        self.message_converter = message_converter

    def create(self, stream: Stream) -> None:
        """Write a stream's events, then its metadata if it has any.

        The metadata is only written once the events were accepted. If that
        second request fails, the events stay written.

        Raises:
            InvalidArgumentError: If the events cannot be encoded as JSON
            EventStoreRuntimeError: If the server rejects the events
            NotAllowed: If the server forbids the write
        """
        records = []
        for event in stream.stream_events:
            record = self.message_converter.convert_to_dict(event)
            record["created_at"] = format_timestamp(record["created_at"])
            records.append(record)

        body = encode_json(records, "Events")
        stream_name = stream.stream_name

        request, response = self._send(
            "POST",
            f"stream/{encode_segment(stream_name)}",
            {"Content-Type": ATOM_JSON},
            body,
        )

        if response.status_code == 204:
            if stream.metadata:
                self.update_stream_metadata(stream_name, stream.metadata)
            return

        if response.status_code == 400:
            raise EventStoreRuntimeError(
                response.reason_phrase,
                status_code=400,
                reason_phrase=response.reason_phrase,
            )

        raise_for_status(request, response)

    def append_to(self, stream_name: StreamName, stream_events: Iterable[Message]) -> None:
        self.create(Stream.of(stream_name, stream_events))

    def update_stream_metadata(
        self, stream_name: StreamName, new_metadata: dict[str, Any]
    ) -> None:
        body = encode_json(new_metadata, "Metadata")

        request, response = self._send(
            "POST",
            f"streammetadata/{encode_segment(stream_name)}",
            {"Content-Type": JSON},
            body,
        )

        if response.status_code == 204:
            return

        raise_for_status(request, response, not_found=lambda: StreamNotFound(stream_name))

    def delete(self, stream_name: StreamName) -> None:
        request, response = self._send("POST", f"delete/{encode_segment(stream_name)}")

        if response.status_code == 204:
            return

        raise_for_status(request, response, not_found=lambda: StreamNotFound(stream_name))

    def fetch_stream_metadata(self, stream_name: StreamName) -> dict[str, Any]:
        request, response = self._send(
            "GET",
            f"streammetadata/{encode_segment(stream_name)}",
            {"Accept": JSON},
        )

        if response.status_code == 200:
            return decode_json(response)

        raise_for_status(request, response, not_found=lambda: StreamNotFound(stream_name))

    def has_stream(self, stream_name: StreamName) -> bool:
        request, response = self._send("GET", f"has-stream/{encode_segment(stream_name)}")

        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False

        raise_for_status(request, response)

    def load(
        self,
        stream_name: StreamName,
        from_number: int = 1,
        count: int | None = None,
        metadata_matcher: MetadataMatcher | None = None,
    ) -> Iterator[Message]:
        """Load events oldest first.

        The response body is read and decoded before this returns; the
        returned iterator only rebuilds messages and never touches the
        network. It can be consumed once.

        Raises:
            StreamNotFound: If the stream does not exist
            InvalidArgumentError: If the server rejects the parameters
            NotAllowed: If the server forbids reading the stream
            EventStoreRuntimeError: On any other failure
        """
        return self._load(stream_name, "forward", from_number, count, metadata_matcher)

    def load_reverse(
        self,
        stream_name: StreamName,
        from_number: int | None = None,
        count: int | None = None,
        metadata_matcher: MetadataMatcher | None = None,
    ) -> Iterator[Message]:
        """Load events newest first.

        Behaves like load(); the server returns the entries already in
        backward order.
        """
        return self._load(stream_name, "backward", from_number, count, metadata_matcher)

    def fetch_stream_names(
        self,
        name_filter: str | None,
        metadata_matcher: MetadataMatcher | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[str]:
        path = "streams" if name_filter is None else f"streams/{encode_segment(name_filter)}"
        query = join_query(
            build_metadata_query(metadata_matcher),
            build_pagination_query(limit, offset),
        )
        return self._fetch_names(with_query(path, query))

    def fetch_stream_names_regex(
        self,
        regex: str,
        metadata_matcher: MetadataMatcher | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[str]:
        query = join_query(
            build_metadata_query(metadata_matcher),
            build_pagination_query(limit, offset),
        )
        return self._fetch_names(with_query(f"streams-regex/{encode_segment(regex)}", query))

    def fetch_category_names(
        self, name_filter: str | None, limit: int = 20, offset: int = 0
    ) -> list[str]:
        path = "categories" if name_filter is None else f"categories/{encode_segment(name_filter)}"
        return self._fetch_names(with_query(path, build_pagination_query(limit, offset)))

    def fetch_category_names_regex(
        self, regex: str, limit: int = 20, offset: int = 0
    ) -> list[str]:
        return self._fetch_names(
            with_query(
                f"categories-regex/{encode_segment(regex)}",
                build_pagination_query(limit, offset),
            )
        )

    def _load(
        self,
        stream_name: StreamName,
        direction: str,
        from_number: int | None,
        count: int | None,
        metadata_matcher: MetadataMatcher | None,
    ) -> Iterator[Message]:
        if from_number is None:
            from_number = MAX_COUNT
        if count is None:
            count = MAX_COUNT

        path = f"stream/{encode_segment(stream_name)}/{from_number}/{direction}/{count}"
        request, response = self._send(
            "GET",
            with_query(path, build_metadata_query(metadata_matcher)),
            {"Accept": ATOM_JSON},
        )

        if response.status_code == 200:
            return self._iterate_entries(self._entries(decode_json(response)))

        if response.status_code == 400:
            raise InvalidArgumentError(response.reason_phrase)

        raise_for_status(request, response, not_found=lambda: StreamNotFound(stream_name))

    def _entries(self, data: Any) -> list[dict[str, Any]]:
        entries = data.get("entries") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise EventStoreRuntimeError("Response from event store contains no entries")
        return entries

    def _iterate_entries(self, entries: list[dict[str, Any]]) -> Iterator[Message]:
        for entry in entries:
            try:
                message_name = entry["message_name"]
                created_at = parse_timestamp(entry["created_at"])
            except (KeyError, TypeError, ValueError) as err:
                raise EventStoreRuntimeError("Could not read event data from entry") from err

            if not isinstance(message_name, str) or not message_name:
                raise EventStoreRuntimeError("Could not read event data from entry")

            yield self.message_factory.create_message(
                message_name, {**entry, "created_at": created_at}
            )

    def _fetch_names(self, target: str) -> list[str]:
        request, response = self._send("GET", target, {"Accept": JSON})

        if response.status_code == 200:
            return decode_json(response)

        raise_for_status(request, response)
