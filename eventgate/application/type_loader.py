"""Type loading utilities.

Provides utilities for dynamically loading Python types from their fully
qualified names, used to rebuild messages from their stored names and to
resolve classes named in configuration.
"""

import importlib
from functools import lru_cache
from typing import Any

from ..domain import get_qualified_name

__all__ = ["get_qualified_name", "load_type"]


@lru_cache(maxsize=256)
def load_type(qualified_name: str) -> type[Any]:
    """Load a type from its fully qualified name.

    Results are cached, so each message name is imported once per process.

    Args:
        qualified_name: The fully qualified name (module.ClassName).

    Returns:
        The loaded type.

    Raises:
        ImportError: If the module cannot be imported or the name does not
            refer to a class in it.
    """
    module_path, _, class_name = qualified_name.rpartition(".")
    if not module_path or not all(qualified_name.split(".")):
        raise ImportError(f"Invalid qualified name: {qualified_name}")

    try:
        module = importlib.import_module(module_path)
    except (TypeError, ValueError) as err:
        raise ImportError(f"Invalid qualified name: {qualified_name}") from err

    try:
        loaded = getattr(module, class_name)
    except AttributeError:
        raise ImportError(f"Module '{module_path}' has no attribute '{class_name}'") from None

    if not isinstance(loaded, type):
        raise ImportError(f"'{qualified_name}' is not a class")
    return loaded
