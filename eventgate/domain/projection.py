from enum import Enum


class ProjectionStatus(str, Enum):
    """Lifecycle status of a server-side projection."""

    RUNNING = "running"
    STOPPING = "stopping"
    DELETING = "deleting"
    DELETING_INCL_EMITTED_EVENTS = "deleting incl emitted events"
    IDLE = "idle"
    RESETTING = "resetting"

    @classmethod
    def from_name(cls, text: str) -> "ProjectionStatus":
        """Resolve a status from its name or its value.

        Matching ignores case and surrounding whitespace, and treats spaces
        as underscores, so ``"RUNNING"``, ``"running"`` and
        ``"Deleting incl emitted events"`` all resolve.

        Raises:
            ValueError: If the text names no known status
        """
        key = text.strip().upper().replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown projection status: {text!r}") from None
