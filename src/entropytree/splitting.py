# -*- coding: utf-8 -*-
"""
entropytree.splitting
=====================

Exhaustive threshold search for univariate binary splits.

:func:`feature_split` scores every threshold of one feature for a subset of
rows and :func:`select_split` keeps the best feature.  Subsets are integer
index arrays into a shared table; the only mutation performed is reordering
of the index array itself.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np

from .impurity import label_entropy

logger = logging.getLogger(__name__)

# gains at or below this are rounding noise, not an improvement
_GAIN_EPS = 1e-12


@dataclass(frozen=True)
class Split:
    """A univariate split rule ``X[feature] < threshold`` with its gain."""

    feature: int
    threshold: float
    gain: float

    @property
    def improves(self) -> bool:
        return self.gain > 0


NO_SPLIT = Split(feature=0, threshold=0.0, gain=0.0)


def _midpoint(lo: float, hi: float) -> float:
    # halves first so values near the float maximum cannot overflow
    mid = 0.5 * lo + 0.5 * hi
    # adjacent floats: keep ``lo`` strictly below the threshold
    if mid > lo and mid <= hi:
        return mid
    return hi


def feature_split(table: np.ndarray, indices: np.ndarray, feature_index: int,
                  label_index: int) -> tuple[float, float]:
    """
    Find the best binary split of a subset on a single feature.

    The subset is sorted in place by the feature (stable mergesort) and every
    boundary between two adjacent, distinct feature values is proposed as a
    threshold at their midpoint.  Each candidate is scored by recomputing the
    entropy of both sides from scratch and weighting it by side size.

    Parameters
    ----------
    table : ndarray of shape (n_samples, n_columns)
        The full table.  Never modified.
    indices : ndarray of int
        Row indices of the subset.  Reordered in place.
    feature_index : int
        Column to split on.
    label_index : int
        Column holding the class label.

    Returns
    -------
    (float, float)
        ``(gain, threshold)`` of the best candidate, or ``(0.0, 0.0)`` when
        no candidate improves on the parent entropy.

    Raises
    ------
    ValueError
        If the feature column contains NaN for any row of the subset.
    """
    column = table[indices, feature_index]
    if np.isnan(column).any():
        raise ValueError(f"feature {feature_index} contains NaN; values must be ordered")
    order = np.argsort(column, kind="mergesort")
    indices[:] = indices[order]
    values = column[order]

    best_gain, best_threshold = 0.0, 0.0
    n = len(indices)
    if n < 2:
        return best_gain, best_threshold

    parent = label_entropy(table, indices, label_index)
    for i in range(n - 1):
        if values[i] == values[i + 1]:
            continue
        n_left = i + 1
        left_h = label_entropy(table, indices[:n_left], label_index)
        right_h = label_entropy(table, indices[n_left:], label_index)
        gain = parent - (n_left * left_h + (n - n_left) * right_h) / n
        if gain <= _GAIN_EPS:
            continue
        if gain > best_gain:
            best_gain = float(gain)
            best_threshold = _midpoint(float(values[i]), float(values[i + 1]))
    return best_gain, best_threshold


def select_split(table: np.ndarray, indices: np.ndarray, label_index: int) -> Split:
    """Run :func:`feature_split` on every non-label column and keep the best.

    Ties go to the lowest feature index.  Returns :data:`NO_SPLIT` when no
    feature has positive gain.
    """
    best = NO_SPLIT
    for j in range(table.shape[1]):
        if j == label_index:
            continue
        gain, threshold = feature_split(table, indices, j, label_index)
        logger.debug("feature %d: gain=%.6f threshold=%.6f", j, gain, threshold)
        if gain > best.gain:
            best = Split(feature=j, threshold=threshold, gain=gain)
    return best
