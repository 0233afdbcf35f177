"""Projection manager contract."""

from abc import ABC, abstractmethod
from typing import Any

from ..domain import ProjectionStatus


class ProjectionManager(ABC):
    """Abstract interface for managing server-side projections.

    Covers both authoring (creating queries and projections) and lifecycle
    control. Implementations that only talk to a remote server may not
    support authoring.
    """

    @abstractmethod
    def create_query(self) -> Any:
        """Create an ad-hoc query over the event store."""
        ...

    @abstractmethod
    def create_projection(self, name: str, options: dict[str, Any] | None = None) -> Any:
        """Create a projection that emits events into the store."""
        ...

    @abstractmethod
    def create_read_model_projection(
        self, name: str, read_model: Any, options: dict[str, Any] | None = None
    ) -> Any:
        """Create a projection that maintains a read model."""
        ...

    @abstractmethod
    def delete_projection(self, name: str, delete_emitted_events: bool) -> None:
        """Delete a projection, optionally with the events it emitted."""
        ...

    @abstractmethod
    def reset_projection(self, name: str) -> None:
        """Reset a projection so it reprocesses all events."""
        ...

    @abstractmethod
    def stop_projection(self, name: str) -> None:
        """Stop a running projection."""
        ...

    @abstractmethod
    def fetch_projection_names(
        self, name_filter: str | None, limit: int = 20, offset: int = 0
    ) -> list[str]:
        """List projection names, optionally restricted to an exact name."""
        ...

    @abstractmethod
    def fetch_projection_names_regex(
        self, regex: str, limit: int = 20, offset: int = 0
    ) -> list[str]:
        """List projection names matching a regular expression."""
        ...

    @abstractmethod
    def fetch_projection_status(self, name: str) -> ProjectionStatus:
        """Get the lifecycle status of a projection."""
        ...

    @abstractmethod
    def fetch_projection_stream_positions(self, name: str) -> dict[str, Any]:
        """Get the stream positions a projection has processed up to."""
        ...

    @abstractmethod
    def fetch_projection_state(self, name: str) -> dict[str, Any]:
        """Get the current state of a projection."""
        ...
