"""Partial structural matching between two multi-property trees.

``partial_match(node, other)`` answers whether ``node``'s shape occurs
positionally inside ``other``'s shape:

1. The roots must satisfy the equality predicate.
2. Property counts must be identical.
3. Per slot, ``node`` may not have more children than ``other``.  With
   ``require_all_children=True`` a non-empty slot must have exactly as many
   children as ``other``'s; an empty slot always passes.
4. Children are compared pairwise by position (index 0 with index 0, ...);
   there is no search for a better alignment.

Cost is linear in the size of ``node``; extra structure in ``other`` is
never visited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from grammar_tree.exceptions import require_not_none

if TYPE_CHECKING:
    from grammar_tree.protocols import NodeComparator
    from grammar_tree.tree.nodes import BaseTreeNode

__all__ = ["data_equality", "partial_match"]


def data_equality(left: BaseTreeNode[Any], right: BaseTreeNode[Any]) -> bool:
    """Default comparator: the two nodes carry equal data."""
    return bool(left.data == right.data)


@dataclass(frozen=True, slots=True)
class _SlotFrame:
    """One property slot of a pattern node and the matching slot of the target."""

    children: tuple[BaseTreeNode[Any], ...]
    other_children: tuple[BaseTreeNode[Any], ...]


def _slot_counts_allowed(
    count: int, other_count: int, require_all_children: bool
) -> bool:
    if require_all_children:
        return count == 0 or count == other_count
    return count <= other_count


def partial_match(
    node: BaseTreeNode[Any],
    other: BaseTreeNode[Any],
    equality: NodeComparator = data_equality,
    *,
    require_all_children: bool = False,
) -> bool:
    """Return True if ``node`` partially matches ``other``.

    Args:
        node:                 The (usually smaller) pattern tree.
        other:                The tree the pattern is looked for in.
        equality:             Predicate over ``(node_from_pattern,
                              node_from_other)``.  Defaults to data equality.
        require_all_children: When True, every non-empty slot of the pattern
                              must match the other slot's child count exactly.

    Raises:
        NullArgumentError: If ``node``, ``other`` or ``equality`` is None.
    """
    require_not_none(node, "node")
    require_not_none(other, "other")
    require_not_none(equality, "equality")

    # Node pairs and slot frames share one stack, so a slot's child count is
    # checked only after every earlier slot's subtree has been matched.
    pending: list[tuple[BaseTreeNode[Any], BaseTreeNode[Any]] | _SlotFrame] = [
        (node, other)
    ]
    while pending:
        task = pending.pop()
        if isinstance(task, _SlotFrame):
            if not _slot_counts_allowed(
                len(task.children), len(task.other_children), require_all_children
            ):
                return False
            pairs = list(zip(task.children, task.other_children, strict=False))
            pending.extend(reversed(pairs))
            continue

        left, right = task
        if not equality(left, right):
            return False
        if left.property_count != right.property_count:
            return False
        frames = [
            _SlotFrame(children, other_children)
            for children, other_children in zip(
                left.children_by_property, right.children_by_property, strict=True
            )
        ]
        pending.extend(reversed(frames))
    return True
