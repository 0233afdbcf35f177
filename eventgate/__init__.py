"""eventgate - Event store and projection manager clients over HTTP.

This module provides the public API: the domain primitives and the
EventStore / ProjectionManager contracts. Backend adapters live under
``eventgate.integrations``.
"""

from .application import (
    ClassPathMessageFactory,
    DefaultMessageConverter,
    EventStore,
    MessageConverter,
    MessageFactory,
    ProjectionManager,
)
from .domain import (
    FieldType,
    Message,
    MetadataMatcher,
    Operator,
    ProjectionStatus,
    Stream,
    StreamName,
)

__all__ = [
    # Contracts
    "EventStore",
    "ProjectionManager",
    "MessageFactory",
    "MessageConverter",
    # Default messaging
    "ClassPathMessageFactory",
    "DefaultMessageConverter",
    # Domain primitives
    "Message",
    "Stream",
    "StreamName",
    "MetadataMatcher",
    "FieldType",
    "Operator",
    "ProjectionStatus",
]
