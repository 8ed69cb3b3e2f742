"""NodeSet: an insertion-ordered set of tree nodes keyed by identity.

Tree nodes define value equality (same data, same structure), so a plain
``set`` collapses two distinct but identical leaves into one entry.
Reference tracking across a deep copy needs the opposite: two nodes are the
same member only when they are the same object.

Example::

    a = TreeNode.create("x", 0)
    b = TreeNode.create("x", 0)
    assert a == b
    assert len({a, b}) == 1
    assert len(NodeSet([a, b])) == 2
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from grammar_tree.tree.nodes import BaseTreeNode

__all__ = ["NodeSet"]

N = TypeVar("N", bound="BaseTreeNode[Any]")


class NodeSet(MutableSet[N]):
    """Mutable set of nodes with identity membership and insertion order."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[N] = ()) -> None:
        self._nodes: dict[int, N] = {}
        for node in nodes:
            self.add(node)

    def __contains__(self, node: object) -> bool:
        return id(node) in self._nodes

    def __iter__(self) -> Iterator[N]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, node: N) -> None:
        self._nodes.setdefault(id(node), node)

    def discard(self, node: N) -> None:
        self._nodes.pop(id(node), None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._nodes.values())!r})"
