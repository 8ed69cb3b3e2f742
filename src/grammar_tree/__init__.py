"""Grammar tree - multi-property trees for grammar and tree-mining code."""

from __future__ import annotations

from grammar_tree.algorithm import (
    NodePair,
    NodeParents,
    NodeWithRef,
    data_equality,
    deep_copy,
    deep_copy_with_references,
    get_parents,
    partial_match,
    tree_size,
)
from grammar_tree.config import RenderConfig
from grammar_tree.exceptions import (
    FrozenNodeError,
    NullArgumentError,
    PropertyIndexError,
    TreeError,
    UnreachableTargetError,
)
from grammar_tree.protocols import NodeComparator
from grammar_tree.render import render
from grammar_tree.tree import BaseTreeNode, FrozenTreeNode, NodeSet, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "BaseTreeNode",
    "FrozenNodeError",
    "FrozenTreeNode",
    "NodeComparator",
    "NodePair",
    "NodeParents",
    "NodeSet",
    "NodeWithRef",
    "NullArgumentError",
    "PropertyIndexError",
    "RenderConfig",
    "TreeError",
    "TreeNode",
    "UnreachableTargetError",
    "data_equality",
    "deep_copy",
    "deep_copy_with_references",
    "get_parents",
    "partial_match",
    "render",
    "tree_size",
]
