"""Deep copy engine for multi-property trees.

Both entry points walk the source tree with an explicit stack of
``NodePair(from_node, to_node)`` work items: popping a pair creates a fresh
``TreeNode`` for every child of ``from_node`` (slot by slot, in order),
appends it to ``to_node`` and pushes the new pair.  Recursion depth is
therefore constant regardless of tree depth.

Copies never share nodes with their source.  Data values are shared by
reference, never cloned.

``deep_copy_with_references`` additionally remaps a set of *reference*
nodes and a single *current reference* from the source tree onto their
counterparts in the copy.  Membership is decided by identity, and the root
is checked before any child is visited.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from grammar_tree.exceptions import require_not_none
from grammar_tree.tree.identity import NodeSet
from grammar_tree.tree.nodes import BaseTreeNode, TreeNode

__all__ = ["NodePair", "NodeWithRef", "deep_copy", "deep_copy_with_references"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class NodePair(Generic[T]):
    """A source node and the copy that mirrors it."""

    from_node: BaseTreeNode[T]
    to_node: TreeNode[T]


@dataclass(frozen=True, slots=True)
class NodeWithRef(Generic[T]):
    """A copied tree plus the copies of the tracked source nodes.

    Attributes:
        node:              Root of the copy.
        references:        Copies of the source reference nodes that were
                           found in the copied subtree, in visit order.
        current_reference: Copy of the current-reference source node, or
                           None if it lies outside the copied subtree.
    """

    node: TreeNode[T]
    references: NodeSet[TreeNode[T]] = field(default_factory=NodeSet)
    current_reference: TreeNode[T] | None = None


def _copy_children(
    from_node: BaseTreeNode[T], to_node: TreeNode[T]
) -> Iterator[NodePair[T]]:
    """Copy every descendant of ``from_node`` under ``to_node``.

    Yields each newly created pair right after the child is attached.
    """
    stack = [NodePair(from_node, to_node)]
    while stack:
        pair = stack.pop()
        for property_index, children in enumerate(pair.from_node.children_by_property):
            for from_child in children:
                to_child = TreeNode.create_like(from_child)
                pair.to_node.add_child(to_child, property_index)
                child_pair = NodePair(from_child, to_child)
                stack.append(child_pair)
                yield child_pair


def deep_copy(node: BaseTreeNode[T]) -> TreeNode[T]:
    """Return a structurally identical, fully independent copy of ``node``.

    Frozen sources produce mutable copies.

    Raises:
        NullArgumentError: If ``node`` is None.
    """
    require_not_none(node, "node")
    root_copy = TreeNode.create_like(node)
    copied = 1 + sum(1 for _ in _copy_children(node, root_copy))
    logger.debug("Deep-copied %d nodes", copied)
    return root_copy


def deep_copy_with_references(
    node: BaseTreeNode[T],
    references: Iterable[BaseTreeNode[T]],
    current_reference: BaseTreeNode[T] | None = None,
) -> NodeWithRef[T]:
    """Deep-copy ``node`` and remap tracked source nodes onto the copy.

    Args:
        node:              Root of the subtree to copy.
        references:        Source nodes whose copies must be reported.  Matched
                           by identity; nodes outside the subtree are ignored.
        current_reference: A single source node whose copy is reported on its
                           own.  May be None.

    Returns:
        A ``NodeWithRef`` bundling the copy root, the remapped reference set
        and the remapped current reference.

    Raises:
        NullArgumentError: If ``node`` or ``references`` is None.
    """
    require_not_none(node, "node")
    require_not_none(references, "references")
    tracked = references if isinstance(references, NodeSet) else NodeSet(references)

    root_copy = TreeNode.create_like(node)
    references_copy: NodeSet[TreeNode[T]] = NodeSet()
    current_reference_copy: TreeNode[T] | None = None

    copied = 0
    for pair in itertools.chain(
        [NodePair(node, root_copy)], _copy_children(node, root_copy)
    ):
        copied += 1
        if pair.from_node in tracked:
            references_copy.add(pair.to_node)
        if pair.from_node is current_reference:
            current_reference_copy = pair.to_node

    logger.debug(
        "Deep-copied %d nodes, remapped %d of %d references (current found: %s)",
        copied,
        len(references_copy),
        len(tracked),
        current_reference_copy is not None,
    )
    return NodeWithRef(root_copy, references_copy, current_reference_copy)
