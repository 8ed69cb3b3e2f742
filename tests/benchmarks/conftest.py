"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible trees.  No random values.
Two shapes: a bushy tree (fan-out 4 over 3 property slots) and a
degenerate chain that is far deeper than the interpreter's recursion limit.
"""

from __future__ import annotations

import pytest

from grammar_tree import TreeNode


def generate_bushy_tree(depth: int, fan_out: int = 4, slots: int = 3) -> TreeNode[str]:
    """Build a complete tree: every inner node has ``fan_out`` children per slot."""
    root: TreeNode[str] = TreeNode.create("n", slots)
    level = [root]
    for d in range(1, depth):
        next_level: list[TreeNode[str]] = []
        for parent in level:
            for slot in range(slots):
                for i in range(fan_out):
                    child: TreeNode[str] = TreeNode.create(f"n{d}_{slot}_{i}", slots)
                    parent.add_child(child, slot)
                    next_level.append(child)
        level = next_level
    return root


def generate_chain(depth: int) -> TreeNode[int]:
    """Build a chain of ``depth`` single-slot nodes."""
    root: TreeNode[int] = TreeNode.create(0, 1)
    current = root
    for i in range(1, depth):
        child: TreeNode[int] = TreeNode.create(i, 1)
        current.add_child(child, 0)
        current = child
    return root


@pytest.fixture(scope="module")
def bushy_tree() -> TreeNode[str]:
    """~22k nodes: depth 5, 12 children per inner node."""
    return generate_bushy_tree(5)


@pytest.fixture(scope="module")
def deep_chain() -> TreeNode[int]:
    """100k-node chain."""
    return generate_chain(100_000)
