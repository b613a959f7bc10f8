from clusteval.similarity import cluster_similarity, jaccard, rand
from clusteval.testutil import random_labels, relabel

import numpy as np
import pytest


def test_identical_partitions():
    r = np.random.default_rng(5)
    labels = random_labels(30, 4, r)
    other = relabel(labels, r)
    assert cluster_similarity(labels, other, 'jaccard') == 1.0
    assert cluster_similarity(labels, other, 'rand') == 1.0


def test_known_values():
    # (n11, n10, n01, n00) == (1, 1, 3, 5)
    labels1 = [0, 0, 1, 1, 2]
    labels2 = [0, 0, 0, 1, 1]
    assert jaccard(labels1, labels2) == pytest.approx(1. / 5.)
    assert rand(labels1, labels2) == pytest.approx(6. / 10.)
    assert cluster_similarity(labels1, labels2) == jaccard(labels1, labels2)


def test_symmetric():
    r = np.random.default_rng(6)
    a = random_labels(40, 3, r)
    b = random_labels(40, 5, r)
    assert jaccard(a, b) == pytest.approx(jaccard(b, a))
    assert rand(a, b) == pytest.approx(rand(b, a))
    assert 0. <= jaccard(a, b) <= 1.
    assert 0. <= rand(a, b) <= 1.


def test_all_singletons():
    labels = [1, 2, 3, 4]
    assert jaccard(labels, [9, 8, 7, 6]) == 1.0
    assert rand(labels, [9, 8, 7, 6]) == 1.0


def test_disagreement():
    # one cluster vs all singletons share no comembers and no separations
    assert jaccard([0, 0, 0], [0, 1, 2]) == 0.0
    assert rand([0, 0, 0], [0, 1, 2]) == 0.0


def test_bad_input():
    with pytest.raises(ValueError):
        cluster_similarity([1, 2], [1, 2], similarity='mirkin')
    with pytest.raises(ValueError):
        jaccard([1], [1])
    with pytest.raises(ValueError):
        rand([1, 2, 3], [1, 2])
