"""algorithm subpackage: structural operations over multi-property trees.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from grammar_tree.algorithm import deep_copy, partial_match, tree_size
    from grammar_tree.tree import TreeNode

    root = TreeNode.create("block", 1)
    root.add_child(TreeNode.create("stmt", 0), 0)
    assert tree_size(root) == 2
    assert partial_match(root, deep_copy(root), require_all_children=True)
"""

from __future__ import annotations

from grammar_tree.algorithm.copying import (
    NodePair,
    NodeWithRef,
    deep_copy,
    deep_copy_with_references,
)
from grammar_tree.algorithm.matching import data_equality, partial_match
from grammar_tree.algorithm.parents import NodeParents, get_parents
from grammar_tree.algorithm.size import tree_size

__all__ = [
    "NodePair",
    "NodeParents",
    "NodeWithRef",
    "data_equality",
    "deep_copy",
    "deep_copy_with_references",
    "get_parents",
    "partial_match",
    "tree_size",
]
