"""Information theoretic comparison of clusterings.

References
----------
Meila, M. (2007). "Comparing clusterings - an information based distance",
Journal of Multivariate Analysis, 98(5), 873-895.

"""

import numpy as np
from scipy.sparse import coo_matrix
from scipy.special import xlogy

from clusteval import validator


def entropy(probs):
    """Shannon entropy (nats) of a probability vector, with 0 log 0 = 0."""
    probs = np.asarray(probs, dtype=np.float64)
    return float(-xlogy(probs, probs).sum())


def _factorize(labels, param_name):
    labels = np.asarray(labels)
    if labels.ndim != 1:
        raise ValueError("{} must be one-dimensional, got shape {}".format(
            param_name, labels.shape))
    _, codes = np.unique(labels, return_inverse=True)
    return codes.ravel()


def variation_information(labels1, labels2):
    """Variation of Information (VI) distance between two clusterings.

    ``VI = H(C1) + H(C2) - 2 I(C1, C2)``, where ``H`` is the entropy of the
    cluster size distribution and ``I`` the mutual information of the two
    clusterings.

    Parameters
    ----------
    labels1, labels2 : (N,) array-like
        Cluster labels for the same `N` observations. Any values that
        ``numpy.unique`` can sort are accepted, not only numbers.

    Returns
    -------
    vi : float
        Between 0 and ``log(N)``. Zero if and only if both labelings describe
        the same partition.

    Examples
    --------
    >>> variation_information([0, 0, 1, 1], [5, 5, 2, 2])
    0.0

    """
    codes1 = _factorize(labels1, 'labels1')
    codes2 = _factorize(labels2, 'labels2')
    validator.validate_len(codes2, codes1.shape[0], 'labels2')
    n = codes1.shape[0]
    if not n:
        raise ValueError("variation of information needs at least one "
                         "observation")

    joint = coo_matrix((np.ones(n), (codes1, codes2))).toarray() / n
    probs1 = joint.sum(axis=1)
    probs2 = joint.sum(axis=0)

    product = np.outer(probs1, probs2)
    nonzero = joint > 0
    mutual_information = (
        joint[nonzero] * np.log(joint[nonzero] / product[nonzero])).sum()

    vi = entropy(probs1) + entropy(probs2) - 2 * mutual_information
    # rounding can leave a tiny negative distance for identical partitions
    return max(float(vi), 0.0)
