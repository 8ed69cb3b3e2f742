"""Tree subpackage: node storage primitives.

Re-exports the public API for the tree module:
- BaseTreeNode: read-only contract shared by every node variant
- TreeNode: mutable node with K append-only property slots
- FrozenTreeNode: immutable snapshot produced by ``freeze()``
- NodeSet: identity-keyed set used for reference tracking
"""

from grammar_tree.tree.identity import NodeSet
from grammar_tree.tree.nodes import BaseTreeNode, FrozenTreeNode, TreeNode

__all__ = ["BaseTreeNode", "FrozenTreeNode", "NodeSet", "TreeNode"]
