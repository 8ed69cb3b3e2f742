"""NodeComparator Protocol: pluggable node equality for partial matching.

Any callable taking ``(left, right)`` nodes and returning a bool satisfies
the protocol; plain functions and lambdas pass ``isinstance`` checks.

Example::

    from grammar_tree.protocols import NodeComparator

    def same_kind(left, right) -> bool:
        return left.data.kind == right.data.kind

    assert isinstance(same_kind, NodeComparator)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from grammar_tree.tree.nodes import BaseTreeNode

__all__ = ["NodeComparator"]


@runtime_checkable
class NodeComparator(Protocol):
    """Structural protocol for node equality predicates.

    ``left`` always comes from the tree being matched, ``right`` from the
    tree it is matched against.
    """

    def __call__(
        self, left: BaseTreeNode[Any], right: BaseTreeNode[Any]
    ) -> bool: ...
