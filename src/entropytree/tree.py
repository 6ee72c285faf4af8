# -*- coding: utf-8 -*-
"""
entropytree.tree
================

This module implements a greedy, top-down, entropy-driven binary decision
tree builder for numeric tables whose class label is stored in one of the
columns.  Each internal node tests a single feature against a threshold
(``X[j] < t`` goes left, ``X[j] >= t`` goes right).  Induction stops when a
subset has ``min_samples`` rows or fewer, or when no feature yields a
positive information gain.  There is no pruning and no backtracking.

By default a stopping point is represented by the *absence* of a node
(``None``).  Passing ``keep_leaves=True`` records a :class:`Leaf` payload
(row count, majority label, label distribution) at each stopping point
instead; the split structure is identical either way.

The :class:`EntropyTree` estimator wraps :func:`build_tree` behind a
scikit-learn style interface together with the text, rule and Graphviz
exporters.  It has no ``predict``: the built structure documents where
splitting stopped, not what to predict there.
"""

from __future__ import annotations
import logging
import warnings
import numpy as np
from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted

from .impurity import count_distribution
from .node import Leaf, TreeNode
from .splitting import select_split
from . import export

logger = logging.getLogger(__name__)

MIN_SAMPLES = 6


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def check_table(table, label_index: int) -> tuple[np.ndarray, int]:
    """Convert ``table`` to a 2-D float array and normalise ``label_index``.

    Negative label indices count from the last column.  Raises ``ValueError``
    for ragged or non-2-D input, an out-of-range label index, any NaN or an
    infinite label.
    Fractional labels are reported with a ``UserWarning``; they are grouped
    by truncation toward zero.
    """
    try:
        arr = np.asarray(table, dtype=float)
    except ValueError as exc:
        raise ValueError(f"table rows must be numeric and of equal length: {exc}") from exc
    if arr.ndim != 2:
        raise ValueError(f"table must be 2-dimensional, got shape {arr.shape}")
    n_columns = arr.shape[1]
    label_index = int(label_index)
    if not -n_columns <= label_index < n_columns:
        raise ValueError(f"label_index {label_index} out of range for {n_columns} columns")
    label_index %= n_columns
    if np.isnan(arr).any():
        rows, cols = np.nonzero(np.isnan(arr))
        raise ValueError(f"table contains NaN (first at row {rows[0]}, column {cols[0]})")
    labels = arr[:, label_index]
    if np.isinf(labels).any():
        raise ValueError(f"label column {label_index} contains infinite values")
    if np.any(labels != np.trunc(labels)):
        warnings.warn(
            f"label column {label_index} contains fractional values; "
            "labels are truncated toward zero when grouped",
            UserWarning,
        )
    return arr, label_index


# -----------------------------------------------------------------------------
# Builder
# -----------------------------------------------------------------------------
def _stop(table, indices, label_index, keep_leaves: bool, reason: str):
    if not keep_leaves:
        return None
    if len(indices) == 0:
        return Leaf(n_samples=0, majority_label=None, distribution={}, reason=reason)
    dist = count_distribution(table[indices, label_index].astype(int))
    majority = max(sorted(dist), key=dist.get)
    return Leaf(n_samples=len(indices), majority_label=majority,
                distribution=dist, reason=reason)


def _grow(table, indices, label_index, depth, min_samples, keep_leaves):
    if len(indices) <= min_samples:
        return _stop(table, indices, label_index, keep_leaves, "min_samples")

    split = select_split(table, indices, label_index)
    if not split.improves:
        return _stop(table, indices, label_index, keep_leaves, "no_gain")

    goes_left = table[indices, split.feature] < split.threshold
    left = _grow(table, indices[goes_left], label_index, depth + 1, min_samples, keep_leaves)
    right = _grow(table, indices[~goes_left], label_index, depth + 1, min_samples, keep_leaves)
    return TreeNode(split, left, right, depth=depth, n_samples=len(indices))


def build_tree(table, label_index: int, *, min_samples: int = MIN_SAMPLES,
               keep_leaves: bool = False):
    """
    Recursively partition ``table`` into a binary entropy tree.

    Parameters
    ----------
    table : array-like of shape (n_samples, n_columns)
        Equal-length numeric rows, one column of which is the label.
    label_index : int
        Column holding the class label.  Negative values count from the end.
    min_samples : int, default=6
        Subsets with this many rows or fewer are not split.
    keep_leaves : bool, default=False
        Record a :class:`Leaf` at stopping points instead of ``None``.

    Returns
    -------
    TreeNode, Leaf or None
        The root.  ``None`` (or a :class:`Leaf`) when the whole table is too
        small to split or no feature improves on its entropy.
    """
    arr, label_index = check_table(table, label_index)
    return _build(arr, label_index, min_samples, keep_leaves)


def _build(arr, label_index, min_samples, keep_leaves):
    indices = np.arange(arr.shape[0])
    root = _grow(arr, indices, label_index, 0, int(min_samples), bool(keep_leaves))
    if isinstance(root, TreeNode):
        logger.info("built tree on %d rows (label %d): %d nodes, depth %d",
                    arr.shape[0], label_index, root.node_count(), root.max_depth())
    else:
        logger.info("built tree on %d rows (label %d): no split", arr.shape[0], label_index)
    return root


# -----------------------------------------------------------------------------
# Estimator
# -----------------------------------------------------------------------------
class EntropyTree(BaseEstimator):
    """
    Entropy-driven binary decision tree (scikit-learn style).

    The estimator either takes a single table that carries its own label
    column (``fit(table)`` with ``label_index``) or a feature matrix plus a
    separate label vector (``fit(X, y)``, in which case ``y`` is appended as
    the last column).

    Parameters
    ----------
    label_index : int, default=-1
        Label column of the table passed to :meth:`fit` when ``y`` is
        omitted.  Ignored when ``y`` is given.
    min_samples : int, default=6
        Subsets with this many rows or fewer are not split.
    keep_leaves : bool, default=False
        Record a :class:`Leaf` (size, majority label, distribution) at every
        stopping point instead of leaving the branch empty.
    feature_names : list[str] or None, default=None
        Names for every column of the fitted table, label included, used by
        the exporters.  Defaults to ``X[i]``.

    Attributes
    ----------
    tree_ : TreeNode, Leaf or None
        Root of the fitted tree.
    label_index_ : int
        Normalised label column of the fitted table.
    n_features_in_ : int
        Number of columns of the fitted table, label included.
    feature_names_in_ : list[str] or None
        Column names used by the exporters.
    """

    def __init__(
        self,
        *,
        label_index: int = -1,
        min_samples: int = MIN_SAMPLES,
        keep_leaves: bool = False,
        feature_names: list[str] | None = None,
    ):
        self.label_index = label_index
        self.min_samples = min_samples
        self.keep_leaves = keep_leaves
        self.feature_names = feature_names

    def fit(self, X, y=None):
        if y is None:
            table, label_index = X, self.label_index
        else:
            X = np.asarray(X, dtype=float)
            y = np.asarray(y, dtype=float)
            if X.ndim != 2:
                raise ValueError(f"X must be 2-dimensional, got shape {X.shape}")
            if len(y) != len(X):
                raise ValueError("y must have the same length as X")
            table, label_index = np.column_stack([X, y]), -1

        table, label_index = check_table(table, label_index)
        if self.feature_names is not None and len(self.feature_names) != table.shape[1]:
            raise ValueError("feature_names length must match the number of table columns")

        self.tree_ = _build(table, label_index, self.min_samples, self.keep_leaves)
        self.label_index_ = label_index
        self.n_features_in_ = table.shape[1]
        self.feature_names_in_ = None if self.feature_names is None else list(self.feature_names)
        return self

    def _names(self, feature_names=None):
        return feature_names if feature_names is not None else self.feature_names_in_

    def get_depth(self) -> int:
        """Number of split levels; 0 when the root did not split."""
        check_is_fitted(self, "label_index_")
        if not isinstance(self.tree_, TreeNode):
            return 0
        return self.tree_.max_depth() + 1

    def get_n_nodes(self) -> int:
        """Number of :class:`TreeNode` instances (splits) in the tree."""
        check_is_fitted(self, "label_index_")
        if not isinstance(self.tree_, TreeNode):
            return 0
        return self.tree_.node_count()

    def render(self, feature_names=None) -> str:
        """Return the indented text rendering of the tree."""
        check_is_fitted(self, "label_index_")
        return export.render_tree(self.tree_, self._names(feature_names))

    def print_tree(self, feature_names=None):
        """Pretty-print the tree to ``stdout``."""
        print(self.render(feature_names))

    def export_rules(self, *, feature_names=None) -> list[str]:
        """
        Export every root-to-stop path as a human-readable rule.

        Each rule has the form ``<antecedent> => <outcome>`` where the
        antecedent is a conjunction of conditions from the root and the
        outcome is the leaf summary, or ``<none>`` when leaves are not kept.
        """
        check_is_fitted(self, "label_index_")
        return export.tree_to_rules(self.tree_, self._names(feature_names))

    def export_dict(self):
        """Return the tree as nested plain ``dict`` objects (``None`` for no node)."""
        check_is_fitted(self, "label_index_")
        return export.tree_to_dict(self.tree_)

    def export_graphviz(self, filename: str | None = None, *, feature_names=None,
                        format: str = "png") -> str:
        """Export the tree with Graphviz; see :func:`entropytree.export.export_graphviz`."""
        check_is_fitted(self, "label_index_")
        return export.export_graphviz(self.tree_, filename,
                                      feature_names=self._names(feature_names), format=format)
