# -*- coding: utf-8 -*-
"""
entropytree.datasets
====================

Small demonstration tables.
"""
from __future__ import annotations
import numpy as np

# two linearly separable blobs; label in column 2
_BLOBS = [
    [2.771244718, 1.784783929, 0.0],
    [1.728571309, 1.169761413, 0.0],
    [3.678319846, 2.81281357, 0.0],
    [3.961043357, 2.61995032, 0.0],
    [2.999208922, 2.209014212, 0.0],
    [7.497545867, 3.162953546, 1.0],
    [9.00220326, 3.339047188, 1.0],
    [7.444542326, 0.476683375, 1.0],
    [10.12493903, 3.234550982, 1.0],
    [6.642287351, 3.319983761, 1.0],
]

BLOBS_LABEL_INDEX = 2
IRIS_LABEL_INDEX = 4


def load_blobs() -> np.ndarray:
    """Return the ten-row, two-feature, two-class table (label index 2)."""
    return np.array(_BLOBS, dtype=float)


def load_iris_table() -> np.ndarray:
    """Return the 150-row iris table with classes 1, 2, 3 in column 4.

    The four feature columns are sepal length, sepal width, petal length and
    petal width, as shipped with scikit-learn.
    """
    from sklearn.datasets import load_iris

    iris = load_iris()
    return np.column_stack([iris.data, iris.target + 1.0])
