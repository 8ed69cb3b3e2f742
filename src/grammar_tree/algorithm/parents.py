"""NodeParents: the path from a root down to a target node.

The path is stored nearest-parent first as three parallel tuples:
``through_nodes[i]`` is an ancestor, and its child at
``(next_property[i], next_child_num[i])`` is the next node down towards the
target.  The last entry is therefore the root.

The search is a depth-first walk in slot order, then child order, that
compares nodes by identity; the first path found is returned.  It uses an
explicit frame stack rather than recursion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from grammar_tree.exceptions import UnreachableTargetError, require_not_none

if TYPE_CHECKING:
    from grammar_tree.tree.nodes import BaseTreeNode

__all__ = ["NodeParents", "get_parents"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _children_in_order(
    node: BaseTreeNode[Any],
) -> Iterator[tuple[int, int, BaseTreeNode[Any]]]:
    for property_index, children in enumerate(node.children_by_property):
        for child_index, child in enumerate(children):
            yield property_index, child_index, child


@dataclass(slots=True)
class _Frame:
    node: BaseTreeNode[Any]
    children: Iterator[tuple[int, int, BaseTreeNode[Any]]]
    property_index: int = -1
    child_index: int = -1


@dataclass(frozen=True, slots=True)
class NodeParents(Generic[T]):
    """Ancestors of ``target_node`` and the directions taken to reach it.

    Attributes:
        target_node:    The node that was searched for.
        through_nodes:  Ancestors, nearest parent first, root last.
        next_property:  Slot index taken out of each ancestor.
        next_child_num: Position within that slot.
    """

    target_node: BaseTreeNode[T]
    through_nodes: tuple[BaseTreeNode[T], ...]
    next_property: tuple[int, ...]
    next_child_num: tuple[int, ...]

    @classmethod
    def find(
        cls, root: BaseTreeNode[T], target: BaseTreeNode[T]
    ) -> NodeParents[T]:
        """Locate ``target`` under ``root`` by identity.

        Returns empty tuples when ``target`` is ``root`` itself.

        Raises:
            NullArgumentError: If ``root`` or ``target`` is None.
            UnreachableTargetError: If ``target`` is not in the subtree.
        """
        require_not_none(root, "root")
        require_not_none(target, "target")
        if root is target:
            return cls(target, (), (), ())

        frames = [_Frame(root, _children_in_order(root))]
        while frames:
            frame = frames[-1]
            step = next(frame.children, None)
            if step is None:
                frames.pop()
                continue
            frame.property_index, frame.child_index, child = step
            if child is target:
                path = frames[::-1]
                return cls(
                    target,
                    tuple(f.node for f in path),
                    tuple(f.property_index for f in path),
                    tuple(f.child_index for f in path),
                )
            frames.append(_Frame(child, _children_in_order(child)))

        logger.debug("Target %r not reachable from root %r", target, root)
        msg = f"target node {target!r} is not reachable from root {root!r}"
        raise UnreachableTargetError(msg)

    @property
    def depth(self) -> int:
        """Number of edges between the root and the target."""
        return len(self.through_nodes)

    def follow(self) -> BaseTreeNode[T]:
        """Walk the recorded directions from the root back down to the target."""
        if not self.through_nodes:
            return self.target_node
        node = self.through_nodes[-1]
        for property_index, child_index in zip(
            reversed(self.next_property), reversed(self.next_child_num), strict=True
        ):
            node = node.get_child(child_index, property_index)
        return node


def get_parents(root: BaseTreeNode[T], target: BaseTreeNode[T]) -> NodeParents[T]:
    """Return the parent path of ``target`` within the tree rooted at ``root``."""
    return NodeParents.find(root, target)
