# -*- coding: utf-8 -*-
"""
entropytree.io
==============

Loading of comma-separated numeric tables.
"""
from __future__ import annotations
import logging
import os
import numpy as np

logger = logging.getLogger(__name__)


def load_table(path, delimiter: str = ",") -> np.ndarray:
    """
    Read a delimited text file of numbers into a 2-D float array.

    Every line is one row and every token is parsed as a float.  Blank lines
    are skipped.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If a token is not a number or rows differ in length.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"no such table file: {path}")
    try:
        table = np.loadtxt(path, delimiter=delimiter, dtype=float, ndmin=2)
    except ValueError as exc:
        raise ValueError(f"could not parse {path}: {exc}") from exc
    logger.info("loaded %s: %d rows x %d columns", path, table.shape[0], table.shape[1])
    return table
