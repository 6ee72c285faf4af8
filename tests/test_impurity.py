import math
import numpy as np
import pytest
from entropytree import count_distribution, entropy, gini
from entropytree.impurity import label_entropy


def test_distribution_frequencies():
    dist = count_distribution([1, 1, 2, 3])
    assert dist == {1: 0.5, 2: 0.25, 3: 0.25}


def test_distribution_sums_to_one():
    values = np.random.default_rng(0).integers(0, 7, size=257)
    dist = count_distribution(values)
    assert sum(dist.values()) == pytest.approx(1.0)
    assert all(0.0 <= p <= 1.0 for p in dist.values())
    # numpy integers are grouped as plain ints
    assert set(dist) <= set(range(7))


def test_distribution_empty_raises():
    with pytest.raises(ValueError):
        count_distribution([])


def test_entropy_point_mass_is_zero():
    assert entropy({5: 1.0}) == 0.0
    assert gini({5: 1.0}) == 0.0


@pytest.mark.parametrize("k", [2, 3, 4, 10])
def test_entropy_uniform_is_log2_k(k):
    dist = count_distribution(list(range(k)))
    assert entropy(dist) == pytest.approx(math.log2(k))


def test_entropy_ignores_zero_probabilities():
    assert entropy([0.5, 0.5, 0.0]) == pytest.approx(1.0)


def test_gini_two_classes():
    assert gini({0: 0.5, 1: 0.5}) == pytest.approx(0.5)
    assert gini([0.25, 0.75]) == pytest.approx(0.375)


def test_label_entropy_truncates_labels():
    # 0.0/0.9 and 1.0/1.5 group together after truncation
    table = np.array([[0.0, 0.0], [0.0, 0.9], [0.0, 1.0], [0.0, 1.5]])
    assert label_entropy(table, np.arange(4), 1) == pytest.approx(1.0)
    assert label_entropy(table, np.array([0, 1]), 1) == 0.0
