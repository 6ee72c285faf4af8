# -*- coding: utf-8 -*-
"""
Build entropy trees for the bundled demonstration tables and print them.
"""

import logging

from entropytree import EntropyTree
from entropytree.datasets import (
    BLOBS_LABEL_INDEX,
    IRIS_LABEL_INDEX,
    load_blobs,
    load_iris_table,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

print("--- Two blobs ---")
blobs = EntropyTree(label_index=BLOBS_LABEL_INDEX).fit(load_blobs())
blobs.print_tree(feature_names=["x0", "x1", "label"])

print("\n--- Iris (stopping points as absent nodes) ---")
names = ["sepal_length", "sepal_width", "petal_length", "petal_width", "species"]
iris = EntropyTree(label_index=IRIS_LABEL_INDEX, feature_names=names).fit(load_iris_table())
iris.print_tree()
print(f"depth={iris.get_depth()} splits={iris.get_n_nodes()}")

print("\n--- Iris rules with leaf summaries ---")
iris_leaves = EntropyTree(label_index=IRIS_LABEL_INDEX, feature_names=names,
                          keep_leaves=True).fit(load_iris_table())
for rule in iris_leaves.export_rules():
    print(rule)
