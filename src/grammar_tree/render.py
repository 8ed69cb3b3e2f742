"""Indented text rendering of multi-property trees.

Each node is written on its own line as ``prefix + converter(data)``.  The
children of slot ``i`` are rendered with the parent's prefix extended by
``f"{sub_node_prefix}({i})"``, so the slot a child lives in is visible on
every line::

    if
    -(0)cond
    -(1)then
    -(1)-(0)call
    -(2)else
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from grammar_tree.config import RenderConfig

if TYPE_CHECKING:
    from grammar_tree.tree.nodes import BaseTreeNode

__all__ = ["render"]

_DEFAULT_CONFIG = RenderConfig()


def render(
    node: BaseTreeNode[Any] | None,
    converter: Callable[[Any], str] = str,
    config: RenderConfig | None = None,
    prefix: str = "",
) -> str:
    """Return the multi-line text form of the subtree rooted at ``node``.

    Args:
        node:      Root of the subtree.  ``None`` renders the placeholder line.
        converter: Turns a node's data into text.  Defaults to ``str``.
        config:    Prefix and placeholder settings.  Defaults to ``RenderConfig()``.
        prefix:    Text written before the root line; children extend it.

    Returns:
        One ``\\n``-terminated line per node, in depth-first slot order.
    """
    parts: list[str] = []
    _render_into(parts, node, prefix, converter, config or _DEFAULT_CONFIG)
    return "".join(parts)


def _render_into(
    parts: list[str],
    node: BaseTreeNode[Any] | None,
    prefix: str,
    converter: Callable[[Any], str],
    config: RenderConfig,
) -> None:
    parts.append(prefix)
    if node is None:
        parts.append(config.null_placeholder)
        parts.append("\n")
        return

    parts.append(converter(node.data))
    parts.append("\n")
    for property_index, children in enumerate(node.children_by_property):
        child_prefix = f"{prefix}{config.sub_node_prefix}({property_index})"
        for child in children:
            _render_into(parts, child, child_prefix, converter, config)
