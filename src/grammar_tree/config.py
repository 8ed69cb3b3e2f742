"""RenderConfig: immutable settings for the textual tree printer.

Each child line is prefixed by its parent's prefix plus
``f"{sub_node_prefix}({slot_index})"``; a ``None`` node is printed as
``null_placeholder``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for ``render``.

    Attributes:
        sub_node_prefix: Marker appended once per nesting level, before the
            parenthesised property-slot index.  Must be non-empty.
        null_placeholder: Text written in place of a missing (None) node.
    """

    sub_node_prefix: str = "-"
    null_placeholder: str = "NULL"

    def __post_init__(self) -> None:
        if not self.sub_node_prefix:
            msg = "sub_node_prefix must be a non-empty string"
            raise ValueError(msg)
        for name in ("sub_node_prefix", "null_placeholder"):
            value = getattr(self, name)
            if "\n" in value or "\r" in value:
                msg = f"{name} must not contain line breaks, got {value!r}"
                raise ValueError(msg)
