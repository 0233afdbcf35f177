"""Transport and request construction for the HTTP adapters.

The adapters need two capabilities, both injected:
- HttpClient: sends a request and returns the response (``httpx.Client`` fits)
- RequestFactory: turns a method and a relative target into a request

HttpRequestFactory is the default RequestFactory. It resolves targets
against a base URI using one of two PathStrategy values.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Protocol

import httpx

from ...domain import InvalidArgumentError


class HttpClient(Protocol):
    """Anything that can send an ``httpx.Request`` synchronously."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


class RequestFactory(Protocol):
    """Builds requests for relative targets such as ``stream/foo?limit=1``."""

    def create_request(
        self,
        method: str,
        target: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> httpx.Request: ...


class PathStrategy(str, Enum):
    """How a relative target is combined with the base URI."""

    APPEND = "append"  # Target is appended to the base path
    REWRITE = "rewrite"  # Target replaces the base path and query


class HttpRequestFactory:
    """Default RequestFactory producing ``httpx.Request`` objects.

    Targets are expected to be already percent-encoded; existing escapes such
    as ``%2F`` are kept as they are.

    Attributes:
        base_uri: URI the targets are resolved against
        strategy: How targets are combined with base_uri
        headers: Headers added to every request; per-call headers win

    Examples:
        >>> factory = HttpRequestFactory("http://localhost:8080/api")
        >>> str(factory.resolve("stream/user-1"))
        'http://localhost:8080/api/stream/user-1'

        >>> factory = HttpRequestFactory("http://localhost:8080/api", PathStrategy.REWRITE)
        >>> str(factory.resolve("stream/user-1"))
        'http://localhost:8080/stream/user-1'
    """

    def __init__(
        self,
        base_uri: str | httpx.URL,
        strategy: PathStrategy = PathStrategy.APPEND,
        headers: Mapping[str, str] | None = None,
    ):
        self.base_uri = httpx.URL(base_uri)
        self.strategy = strategy
        self.headers = dict(headers or {})

        if not self.base_uri.is_absolute_url:
            raise InvalidArgumentError(f"Base URI must be absolute, got '{base_uri}'")

        # Base path as a directory, the way httpx.Client treats base_url
        base_path = self.base_uri.raw_path.partition(b"?")[0]
        self._base_path = base_path if base_path.endswith(b"/") else base_path + b"/"

    def resolve(self, target: str) -> httpx.URL:
        """Resolve a relative target into an absolute URL."""
        relative = httpx.URL(target).raw_path.lstrip(b"/")
        if self.strategy is PathStrategy.REWRITE:
            return self.base_uri.copy_with(raw_path=b"/" + relative)
        return self.base_uri.copy_with(raw_path=self._base_path + relative)

    def create_request(
        self,
        method: str,
        target: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> httpx.Request:
        merged = httpx.Headers(self.headers)
        merged.update(headers or {})
        return httpx.Request(method, self.resolve(target), headers=merged, content=body)


def request_factory_from_client(http_client: HttpClient) -> RequestFactory:
    """Derive a request factory from the client's own ``base_url``.

    Used when an adapter is constructed without an explicit request factory.

    Raises:
        InvalidArgumentError: If the client has no absolute base URL
    """
    base_url = getattr(http_client, "base_url", None)
    if base_url is None or not httpx.URL(base_url).is_absolute_url:
        raise InvalidArgumentError(
            "A request factory is required when the HTTP client has no base URL"
        )
    return HttpRequestFactory(base_url)


RequestFactoryProvider = Callable[[HttpClient], RequestFactory]
