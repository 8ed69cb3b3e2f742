"""Subtree size computation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from grammar_tree.exceptions import require_not_none

if TYPE_CHECKING:
    from grammar_tree.tree.nodes import BaseTreeNode

__all__ = ["tree_size"]


def tree_size(node: BaseTreeNode[Any]) -> int:
    """Return the number of nodes in the subtree rooted at ``node``, root included.

    Walks the tree with an explicit work list, so depth is unbounded.

    Raises:
        NullArgumentError: If ``node`` is None.
    """
    require_not_none(node, "node")

    size = 1
    to_look = [node]
    while to_look:
        current = to_look.pop()
        for children in current.children_by_property:
            size += len(children)
            to_look.extend(children)
    return size
