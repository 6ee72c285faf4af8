# -*- coding: utf-8 -*-
"""
entropytree.node
================

Data structures produced by the tree builder: :class:`TreeNode` for each
gain-positive split and the optional :class:`Leaf` summary recorded at
stopping points.  Each node exclusively owns its children; the structure has
no parent links.
"""

from __future__ import annotations
from dataclasses import dataclass

from .splitting import Split


@dataclass(frozen=True)
class Leaf:
    """Summary of a subset where splitting stopped.

    Only produced when the builder runs with ``keep_leaves=True``.

    Attributes
    ----------
    n_samples : int
        Rows in the subset.
    majority_label : int or None
        Most frequent truncated label; ties go to the smallest label.
        ``None`` for an empty table.
    distribution : dict
        Label distribution of the subset.
    reason : str
        ``"min_samples"`` or ``"no_gain"``.
    """

    n_samples: int
    majority_label: int | None
    distribution: dict
    reason: str


class TreeNode:
    """Internal node of an entropy tree.

    Parameters
    ----------
    split : Split
        The gain-positive split applied at this node.
    left, right : TreeNode, Leaf or None
        Subtrees for ``X[feature] < threshold`` and ``X[feature] >= threshold``.
        ``None`` marks a branch where splitting stopped.
    depth : int, default=0
        Depth of the node, root at 0.
    n_samples : int, default=0
        Size of the subset the node was built from.
    """

    __slots__ = ("split", "left", "right", "depth", "n_samples")

    def __init__(self, split: Split, left=None, right=None, *, depth: int = 0,
                 n_samples: int = 0):
        self.split = split
        self.left = left
        self.right = right
        self.depth = depth
        self.n_samples = n_samples

    @property
    def is_leaf(self) -> bool:
        """True when neither child is a :class:`TreeNode`."""
        return not isinstance(self.left, TreeNode) and not isinstance(self.right, TreeNode)

    def children(self):
        return (self.left, self.right)

    def iter_nodes(self):
        """Yield every :class:`TreeNode` of the subtree in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            for child in (node.right, node.left):
                if isinstance(child, TreeNode):
                    stack.append(child)

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def max_depth(self) -> int:
        """Depth of the deepest :class:`TreeNode` below this one, relative to it."""
        return max(node.depth for node in self.iter_nodes()) - self.depth

    def __repr__(self):
        s = self.split
        return (f"TreeNode(feature={s.feature}, threshold={s.threshold:.4f}, "
                f"gain={s.gain:.4f}, depth={self.depth}, n_samples={self.n_samples})")
