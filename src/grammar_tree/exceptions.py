"""Exceptions raised by grammar-tree operations.

Every leaf class also derives from the matching built-in exception, so
callers may catch either ``PropertyIndexError`` or plain ``IndexError``.
None of these are recoverable: they signal a caller bug.
"""

from __future__ import annotations

__all__ = [
    "FrozenNodeError",
    "NullArgumentError",
    "PropertyIndexError",
    "TreeError",
    "UnreachableTargetError",
]


class TreeError(Exception):
    """Base exception for grammar-tree operations."""


class NullArgumentError(TreeError, TypeError):
    """A required argument was ``None``."""


class PropertyIndexError(TreeError, IndexError):
    """A property slot or child position is out of range."""


class UnreachableTargetError(TreeError, ValueError):
    """The target node of a parent-path query is not reachable from the root."""


class FrozenNodeError(TreeError, TypeError):
    """Attempted to append a child to a frozen node."""


def require_not_none(value: object, name: str) -> None:
    """Raise ``NullArgumentError`` if ``value`` is None."""
    if value is None:
        msg = f"{name} must not be None"
        raise NullArgumentError(msg)
