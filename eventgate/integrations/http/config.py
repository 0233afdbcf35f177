"""HTTP integration configuration using pydantic-settings."""

from functools import cached_property
from types import TracebackType

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings
from typing_extensions import Self

from ...application import MessageConverter, MessageFactory, load_type
from ...domain import InvalidArgumentError
from .event_store import HttpEventStore
from .projection_manager import HttpProjectionManager
from .transport import HttpRequestFactory, PathStrategy


class HttpConfiguration(BaseSettings):
    """Configuration and factory for the HTTP adapters.

    All settings can be configured via environment variables with the
    EVENTGATE_HTTP_ prefix. For example:
    - EVENTGATE_HTTP_URI=http://eventstore:8080/api/
    - EVENTGATE_HTTP_PATH_STRATEGY=rewrite
    - EVENTGATE_HTTP_TIMEOUT_SECONDS=5
    - EVENTGATE_HTTP_HEADERS='{"Authorization": "Bearer ..."}'

    The configuration also acts as a factory, providing lazily created and
    cached properties for the HTTP client, the request factory, and both
    adapters. The client is only closed if it was created.

    Attributes:
        uri: Base URI of the event store server.
        path_strategy: How request paths are combined with ``uri``.
        timeout_seconds: Timeout applied by the HTTP client to every request.
        headers: Headers sent with every request (e.g. authentication).
        message_factory: Qualified class name of the MessageFactory.
        message_converter: Qualified class name of the MessageConverter.

    Example:
        >>> with HttpConfiguration(uri="http://localhost:8080/") as config:
        ...     store = config.event_store
        ...     store.has_stream(StreamName("user-42"))
    """

    uri: str = "http://localhost:8080/"
    path_strategy: PathStrategy = PathStrategy.APPEND
    timeout_seconds: float = Field(default=10.0, ge=0)
    headers: dict[str, str] = Field(default_factory=dict)
    message_factory: str = "eventgate.application.messaging.ClassPathMessageFactory"
    message_converter: str = "eventgate.application.messaging.DefaultMessageConverter"

    model_config = {"env_prefix": "EVENTGATE_HTTP_"}

    @cached_property
    def client(self) -> httpx.Client:
        """Get the HTTP client.

        The client is lazily created and cached for reuse.
        """
        return httpx.Client(timeout=self.timeout_seconds, headers=self.headers)

    @cached_property
    def request_factory(self) -> HttpRequestFactory:
        """Get the request factory for the configured URI and strategy."""
        return HttpRequestFactory(self.uri, self.path_strategy, self.headers)

    @cached_property
    def event_store(self) -> HttpEventStore:
        """Get the event store adapter."""
        return HttpEventStore(
            _instantiate(self.message_factory, MessageFactory),
            _instantiate(self.message_converter, MessageConverter),
            self.client,
            self.request_factory,
        )

    @cached_property
    def projection_manager(self) -> HttpProjectionManager:
        """Get the projection manager adapter."""
        return HttpProjectionManager(self.client, self.request_factory)

    def close(self) -> None:
        """Close the HTTP client if it was created."""
        if "client" in self.__dict__:
            self.client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


def _instantiate(qualified_name: str, expected: type) -> object:
    try:
        loaded = load_type(qualified_name)
    except ImportError as err:
        raise InvalidArgumentError(f"Cannot load configured class {qualified_name}") from err

    if not issubclass(loaded, expected):
        raise InvalidArgumentError(
            f"Configured class {qualified_name} is not a {expected.__name__}"
        )
    return loaded()
