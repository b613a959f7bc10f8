"""Test helpers for comembership based measures

"""

import numpy as np
import itertools as it


def comembership_bruteforce(labels):
    """Reference comembership vector, one ``itertools.combinations`` pair at
    a time.

    """
    return np.array([1. if a == b else 0.
                     for a, b in it.combinations(labels, 2)])


def random_labels(n, k, r=None):
    if r is None:
        r = np.random.default_rng()
    return r.integers(0, k, size=n)


def relabel(labels, r=None):
    """Map every distinct label to a new, distinct value, keeping the
    partition.

    """
    if r is None:
        r = np.random.default_rng()
    uniq = np.unique(labels)
    # spread out and shuffled so the new labels share no order with the old
    targets = r.permutation(len(uniq)) * 7.5 - 100.
    mapping = dict(zip(uniq.tolist(), targets.tolist()))
    return np.array([mapping[x] for x in np.asarray(labels).tolist()])


def permutation_iter(n):
    """Every partition of ``n`` elements, as canonical assignment vectors
    (restricted growth strings): the first element is in group 0 and each
    element is in an existing group or the next new one.

    """
    if n == 0:
        yield []
        return

    def rec(prefix, ngroups):
        if len(prefix) == n:
            yield list(prefix)
            return
        for g in range(ngroups + 1):
            prefix.append(g)
            for x in rec(prefix, max(ngroups, g + 1)):
                yield x
            prefix.pop()

    for x in rec([0], 1):
        yield x


def permutation_canonical(assignments):
    """Rename groups in order of first appearance, the canonical form used
    by :func:`permutation_iter`.

    """
    mapping = {}
    canonical = []
    for x in assignments:
        if x not in mapping:
            mapping[x] = len(mapping)
        canonical.append(mapping[x])
    return canonical
