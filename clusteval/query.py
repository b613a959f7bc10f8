"""Queries over collections of clusterings.

Note that the functions here take a list of label vectors (for instance one
per posterior sample of a clustering model), as opposed to a single one.

"""

import numpy as np
from scipy.spatial.distance import squareform

from clusteval import validator
from clusteval.comembership import comembership


def zmatrix(clusterings):
    """Compute a z-matrix (cluster co-assignment matrix). The ij-th entry of a
    z-matrix is a real value scalar between [0, 1] indicating the frequency of
    how often entities i and j appear in the same cluster.

    Parameters
    ----------
    clusterings : list of (N,) array-like
        Numeric cluster labels; every clustering must cover the same `N`
        entities.

    Returns
    -------
    zmat : (N, N) ndarray

    Notes
    -----
    The comembership vectors are averaged in their condensed form and only
    expanded at the end, but the result is dense, so only use this for small
    N.

    """
    clusterings = list(clusterings)
    if not clusterings:
        raise ValueError("zmatrix needs at least one clustering")
    n = len(clusterings[0])
    for idx, labels in enumerate(clusterings):
        validator.validate_len(labels, n, 'clusterings[{}]'.format(idx))
    if n <= 1:
        return np.ones((n, n))
    vectors = [comembership(labels) for labels in clusterings]
    zmat = squareform(np.mean(vectors, axis=0), checks=False)
    np.fill_diagonal(zmat, 1.0)
    return zmat
