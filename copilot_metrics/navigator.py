"""Safe traversal of decoded JSON documents.

Every helper here returns ``None`` when the requested structure is missing
or has the wrong shape, so callers can skip a branch without exception
handling.
"""

from collections.abc import Mapping
from typing import Any


def lookup(node: Any, *keys: str) -> Any | None:
    """Follow ``keys`` as successive object lookups starting at ``node``.

    Args:
        node: Any decoded JSON value.
        keys: Object keys to apply in order.

    Returns:
        The node reached after the last key, or None if a step hit a
        non-object node or a missing key.
    """
    current = node
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def resolve_array(node: Any, *keys: str) -> list[Any] | None:
    """Follow ``keys`` from ``node`` and return the result only if it is an array.

    Args:
        node: Any decoded JSON value.
        keys: Object keys to apply in order.

    Returns:
        The list found at the end of the path, or None when the path is
        missing, crosses a non-object node, or ends on a non-array value.
    """
    found = lookup(node, *keys)
    if isinstance(found, list):
        return found
    return None
