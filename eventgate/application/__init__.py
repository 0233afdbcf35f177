"""Contracts implemented by the backend adapters.

- EventStore: Stream storage
- ProjectionManager: Projection lifecycle control
- MessageFactory / MessageConverter: Message (de)serialization hooks
"""

from .messaging import (
    ClassPathMessageFactory,
    DefaultMessageConverter,
    MessageConverter,
    MessageFactory,
)
from .projections import ProjectionManager
from .store import EventStore
from .type_loader import get_qualified_name, load_type

__all__ = [
    "EventStore",
    "ProjectionManager",
    "MessageFactory",
    "MessageConverter",
    "ClassPathMessageFactory",
    "DefaultMessageConverter",
    "get_qualified_name",
    "load_type",
]
