"""HTTP implementation of ProjectionManager."""

from typing import Any, NoReturn

from ...application import ProjectionManager
from ...domain import (
    EventStoreRuntimeError,
    ProjectionNotFound,
    ProjectionStatus,
    UnsupportedOperationError,
)
from .adapter import HttpAdapter
from .query import build_pagination_query, encode_segment, with_query
from .responses import decode_json, raise_for_status
from .transport import (
    HttpClient,
    RequestFactory,
    RequestFactoryProvider,
    request_factory_from_client,
)

JSON = "application/json"


class HttpProjectionManager(HttpAdapter, ProjectionManager):
    """ProjectionManager that controls projections on a remote server.

    Only lifecycle control and introspection are available over HTTP.
    Creating queries or projections always raises UnsupportedOperationError.

    Note:
        The server reports a projection's status in the HTTP reason phrase
        of the response, not in its body.

    Examples:
        >>> client = httpx.Client(base_url="http://localhost:8080/")
        >>> manager = HttpProjectionManager(client)
        >>> manager.fetch_projection_status("user_overview")
        <ProjectionStatus.RUNNING: 'running'>
    """

    def __init__(
        self,
        http_client: HttpClient,
        request_factory: RequestFactory | None = None,
        *,
        default_request_factory: RequestFactoryProvider = request_factory_from_client,
    ):
        super().__init__(http_client, request_factory, default_request_factory)

    def create_query(self) -> NoReturn:
        raise UnsupportedOperationError(f"{type(self).__name__}.create_query not implemented")

    def create_projection(self, name: str, options: dict[str, Any] | None = None) -> NoReturn:
        raise UnsupportedOperationError(
            f"{type(self).__name__}.create_projection not implemented"
        )

    def create_read_model_projection(
        self, name: str, read_model: Any, options: dict[str, Any] | None = None
    ) -> NoReturn:
        raise UnsupportedOperationError(
            f"{type(self).__name__}.create_read_model_projection not implemented"
        )

    def delete_projection(self, name: str, delete_emitted_events: bool) -> None:
        flag = "true" if delete_emitted_events else "false"
        self._control(f"projection/delete/{encode_segment(name)}/{flag}", name)

    def reset_projection(self, name: str) -> None:
        self._control(f"projection/reset/{encode_segment(name)}", name)

    def stop_projection(self, name: str) -> None:
        self._control(f"projection/stop/{encode_segment(name)}", name)

    def fetch_projection_names(
        self, name_filter: str | None, limit: int = 20, offset: int = 0
    ) -> list[str]:
        if name_filter is None:
            path = "projections"
        else:
            path = f"projections/{encode_segment(name_filter)}"
        return self._fetch_names(with_query(path, build_pagination_query(limit, offset)))

    def fetch_projection_names_regex(
        self, regex: str, limit: int = 20, offset: int = 0
    ) -> list[str]:
        return self._fetch_names(
            with_query(
                f"projections-regex/{encode_segment(regex)}",
                build_pagination_query(limit, offset),
            )
        )

    def fetch_projection_status(self, name: str) -> ProjectionStatus:
        """Get a projection's status from the response's reason phrase.

        Raises:
            ProjectionNotFound: If the projection does not exist
            NotAllowed: If the server forbids the request
            EventStoreRuntimeError: If the reason phrase names no known
                status, or on any other failure
        """
        request, response = self._send(
            "GET", f"projection/status/{encode_segment(name)}", {"Accept": JSON}
        )

        if response.status_code == 200:
            try:
                return ProjectionStatus.from_name(response.reason_phrase)
            except ValueError as err:
                raise EventStoreRuntimeError(
                    str(err), status_code=200, reason_phrase=response.reason_phrase
                ) from err

        raise_for_status(request, response, not_found=lambda: ProjectionNotFound(name))

    def fetch_projection_stream_positions(self, name: str) -> dict[str, Any]:
        return self._fetch(f"projection/stream-positions/{encode_segment(name)}", name)

    def fetch_projection_state(self, name: str) -> dict[str, Any]:
        return self._fetch(f"projection/state/{encode_segment(name)}", name)

    def _control(self, target: str, name: str) -> None:
        request, response = self._send("POST", target)

        if response.status_code == 204:
            return

        raise_for_status(request, response, not_found=lambda: ProjectionNotFound(name))

    def _fetch(self, target: str, name: str) -> Any:
        request, response = self._send("GET", target, {"Accept": JSON})

        if response.status_code == 200:
            return decode_json(response)

        raise_for_status(request, response, not_found=lambda: ProjectionNotFound(name))

    def _fetch_names(self, target: str) -> list[str]:
        request, response = self._send("GET", target, {"Accept": JSON})

        if response.status_code == 200:
            return decode_json(response)

        raise_for_status(request, response)
