# -*- coding: utf-8 -*-
"""
entropytree.impurity
====================

Empirical distributions and the impurity measures computed over them.

A *distribution* here is a plain ``dict`` mapping each observed value to its
relative frequency.  Values are grouped by exact equality, so continuous
label columns are truncated to integers before they are counted (see
:func:`label_entropy`).
"""

from __future__ import annotations
from collections import Counter
from collections.abc import Mapping
import numpy as np


def count_distribution(values) -> dict:
    """Return the empirical frequency distribution of ``values``.

    Parameters
    ----------
    values : iterable of hashable
        Discrete observations.  Order is irrelevant and duplicates are
        expected.

    Returns
    -------
    dict
        Mapping ``value -> count / len(values)`` over the distinct values
        observed.  Probabilities sum to one.

    Raises
    ------
    ValueError
        If ``values`` is empty.
    """
    if isinstance(values, np.ndarray):
        values = values.tolist()
    counts = Counter(values)
    total = sum(counts.values())
    if total == 0:
        raise ValueError("cannot estimate a distribution from an empty sequence")
    return {value: n / total for value, n in counts.items()}


def _probabilities(distribution) -> np.ndarray:
    if isinstance(distribution, Mapping):
        distribution = distribution.values()
    return np.fromiter(distribution, dtype=float)


def entropy(distribution) -> float:
    """Shannon entropy in bits, ``-sum(p * log2(p))``.

    ``distribution`` may be a mapping as returned by
    :func:`count_distribution` or any iterable of probabilities.  Zero
    probabilities contribute nothing.
    """
    p = _probabilities(distribution)
    p = p[p > 0]
    return float(-np.sum(p * np.log2(p))) + 0.0


def gini(distribution) -> float:
    """Gini impurity, ``1 - sum(p ** 2)``."""
    p = _probabilities(distribution)
    return float(1.0 - np.sum(p * p))


def label_entropy(table: np.ndarray, indices: np.ndarray, label_index: int) -> float:
    """Entropy of the label column over the rows selected by ``indices``.

    Labels are truncated toward zero before grouping so that float-encoded
    class labels compare exactly.
    """
    labels = table[indices, label_index].astype(int)
    return entropy(count_distribution(labels))
