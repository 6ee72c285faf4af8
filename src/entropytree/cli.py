# -*- coding: utf-8 -*-
"""
entropytree.cli
===============

Command-line entry point: build and print an entropy tree for a CSV table.
"""
from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

from .io import load_table
from .tree import MIN_SAMPLES, EntropyTree

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="entropytree",
                                 description="Build an entropy decision tree from a numeric CSV table")
    ap.add_argument("path", help="Comma-separated file, one numeric row per line")
    ap.add_argument("--label-index", type=int, default=-1,
                    help="Column holding the class label (negative counts from the end)")
    ap.add_argument("--min-samples", type=int, default=MIN_SAMPLES,
                    help="Subsets with this many rows or fewer are not split")
    ap.add_argument("--keep-leaves", action="store_true",
                    help="Report size and majority label where splitting stopped")
    ap.add_argument("--rules", action="store_true", help="Print one rule per path instead of the tree")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for build summaries, -vv for per-feature split results")
    args = ap.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        table = load_table(args.path)
        model = EntropyTree(label_index=args.label_index, min_samples=args.min_samples,
                            keep_leaves=args.keep_leaves).fit(table)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if args.rules:
        for rule in model.export_rules():
            print(rule)
    else:
        model.print_tree()
    return 0
