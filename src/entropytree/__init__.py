"""
entropytree: greedy entropy-driven binary decision trees for numeric tables.

Exports:
    - EntropyTree
    - build_tree, TreeNode, Leaf, Split, NO_SPLIT
    - feature_split, select_split
    - count_distribution, entropy, gini
    - load_table
"""
from .impurity import count_distribution, entropy, gini
from .splitting import NO_SPLIT, Split, feature_split, select_split
from .tree import EntropyTree, Leaf, TreeNode, build_tree
from .io import load_table

__all__ = [
    "EntropyTree",
    "build_tree",
    "TreeNode",
    "Leaf",
    "Split",
    "NO_SPLIT",
    "feature_split",
    "select_split",
    "count_distribution",
    "entropy",
    "gini",
    "load_table",
]
__version__ = "0.1.0"
