import logging
from collections.abc import Mapping

import httpx

from .transport import (
    HttpClient,
    RequestFactory,
    RequestFactoryProvider,
    request_factory_from_client,
)

LOGGER = logging.getLogger(__name__)


class HttpAdapter:
    """Shared plumbing for adapters that talk to the event store server.

    Holds the injected client and request factory and nothing else; every
    call builds and sends exactly one request.

    Attributes:
        http_client: Client used to send requests
        request_factory: Factory used to build requests
    """

    def __init__(
        self,
        http_client: HttpClient,
        request_factory: RequestFactory | None = None,
        default_request_factory: RequestFactoryProvider = request_factory_from_client,
    ):
        """Initialize the adapter.

        Args:
            http_client: Client used to send requests
            request_factory: Factory used to build requests; when omitted,
                ``default_request_factory(http_client)`` supplies one
            default_request_factory: Fallback used when no request factory
                is given
        """
        self.http_client = http_client
        self.request_factory = (
            request_factory if request_factory is not None else default_request_factory(http_client)
        )

    def _send(
        self,
        method: str,
        target: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> tuple[httpx.Request, httpx.Response]:
        request = self.request_factory.create_request(method, target, headers, body)
        LOGGER.debug("Sending request", extra={"method": method, "url": str(request.url)})
        return request, self.http_client.send(request)
