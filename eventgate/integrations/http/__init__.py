"""HTTP integration for eventgate.

This module provides HTTP implementations of the EventStore and
ProjectionManager interfaces, talking to a remote event store server's
REST API through a synchronous httpx client.

Installation:
    pip install eventgate

Usage:
    >>> from eventgate.integrations.http import (
    ...     HttpConfiguration,
    ...     HttpEventStore,
    ...     HttpProjectionManager,
    ...     HttpRequestFactory,
    ...     PathStrategy,
    ... )
    >>>
    >>> # From settings (reads EVENTGATE_HTTP_* environment variables)
    >>> with HttpConfiguration(uri="http://localhost:8080/") as config:
    ...     store = config.event_store
    ...     manager = config.projection_manager
    >>>
    >>> # Or wired by hand
    >>> client = httpx.Client()
    >>> factory = HttpRequestFactory("http://localhost:8080/api", PathStrategy.REWRITE)
    >>> store = HttpEventStore(
    ...     ClassPathMessageFactory(), DefaultMessageConverter(), client, factory
    ... )
    >>> manager = HttpProjectionManager(client, factory)
"""

from .config import HttpConfiguration
from .event_store import HttpEventStore
from .projection_manager import HttpProjectionManager
from .transport import (
    HttpClient,
    HttpRequestFactory,
    PathStrategy,
    RequestFactory,
    request_factory_from_client,
)

__all__ = [
    "HttpConfiguration",
    "HttpEventStore",
    "HttpProjectionManager",
    "HttpClient",
    "HttpRequestFactory",
    "PathStrategy",
    "RequestFactory",
    "request_factory_from_client",
]
