"""Comembership vectors.

For a vector of `n` cluster labels, the comembership vector holds one 0/1
indicator per unordered pair of observations ``(i, j)`` with ``i < j``,
telling whether the two observations carry the same label. Pairs are
enumerated row by row::

    (0, 1), (0, 2), ..., (0, n-1), (1, 2), ..., (n-2, n-1)

which is the condensed ordering used by ``scipy.spatial.distance``, so a
comembership vector can be expanded into a square matrix with
``squareform``.

Labels are compared with exact floating point equality. Two labels that
differ only by rounding noise are different clusters, and ``nan`` is never a
comember of anything.

"""

import logging
from collections import namedtuple

import numpy as np

from clusteval import validator
from clusteval.cxx import _comembership

logger = logging.getLogger(__name__)

_MAX_INDEX = np.iinfo(np.intp).max

comembership_table_result = namedtuple(
    'comembership_table_result', ['n11', 'n10', 'n01', 'n00'])


def npairs(n):
    """Number of unordered pairs among `n` observations, ``n * (n - 1) / 2``.

    Parameters
    ----------
    n : int
        Number of observations.

    Returns
    -------
    npairs : int
        Zero when ``n <= 1``.

    Raises
    ------
    OverflowError
        If the pair count cannot be used as an array length or index on this
        platform.

    """
    validator.validate_integer(n, 'n')
    validator.validate_nonnegative(n, 'n')
    n = int(n)
    if n <= 1:
        return 0
    # row offsets are computed as i * n in the compiled kernel
    if n * n > _MAX_INDEX:
        raise OverflowError(
            "{} observations give {} pairs, too many to index on this "
            "platform (limit {})".format(n, n * (n - 1) // 2, _MAX_INDEX))
    return n * (n - 1) // 2


def _check_allocation(total):
    # numpy limits an array to intp.max bytes, not intp.max elements
    nbytes = total * np.dtype(np.float64).itemsize
    if nbytes > _MAX_INDEX:
        raise OverflowError(
            "{} pairs need {} bytes, more than an array can hold on this "
            "platform (limit {})".format(total, nbytes, _MAX_INDEX))


def row_offset(i, n):
    """Linear index of the pair ``(i, i + 1)``, i.e. where row `i` starts.

    Equal to the number of pairs in rows ``0 .. i-1``. ``row_offset(n, n)``
    (one past the last row) is ``npairs(n)``.

    """
    validator.validate_integer(i, 'i')
    validator.validate_integer(n, 'n')
    i, n = int(i), int(n)
    if not 0 <= i <= n:
        raise ValueError("row {} out of range for n={}".format(i, n))
    return i * n - i * (i + 1) // 2


def pair_index(i, j, n):
    """Linear index of the pair ``(i, j)``, ``0 <= i < j < n``."""
    for value, name in ((i, 'i'), (j, 'j'), (n, 'n')):
        validator.validate_integer(value, name)
    i, j, n = int(i), int(j), int(n)
    if not 0 <= i < j < n:
        raise ValueError(
            "need 0 <= i < j < n, got i={}, j={}, n={}".format(i, j, n))
    return row_offset(i, n) + (j - i - 1)


def index_pair(idx, n):
    """Inverse of :func:`pair_index`: the pair ``(i, j)`` stored at `idx`."""
    validator.validate_integer(idx, 'idx')
    total = npairs(n)
    idx, n = int(idx), int(n)
    if not 0 <= idx < total:
        raise ValueError(
            "index {} out of range for n={} ({} pairs)".format(idx, n, total))
    # rows shrink by one pair each, so the row is the largest i with
    # row_offset(i, n) <= idx; start from the closed-form estimate and fix up
    # floating point error
    b = 2 * n - 1
    i = int((b - np.sqrt(float(b * b - 8 * idx))) // 2)
    i = min(max(i, 0), n - 2)
    while row_offset(i, n) > idx:
        i -= 1
    while row_offset(i + 1, n) <= idx:
        i += 1
    return i, i + 1 + idx - row_offset(i, n)


def comembership(labels):
    """Compute the comembership vector of a clustering.

    Parameters
    ----------
    labels : (N,) array-like
        Numeric cluster labels. Only equality between labels is used.

    Returns
    -------
    comembership : (N * (N - 1) / 2,) ndarray of float64
        A newly allocated array. The entry for pair ``(i, j)`` (see
        :func:`pair_index`) is 1.0 if ``labels[i] == labels[j]`` and 0.0
        otherwise. Empty when ``N <= 1``.

    Raises
    ------
    TypeError
        If `labels` is not numeric.
    ValueError
        If `labels` is not one-dimensional.
    OverflowError
        If `N` is too large for the result to be addressable. Raised before
        anything is allocated.

    Examples
    --------
    >>> comembership([1, 2, 1, 2])
    array([0., 1., 0., 0., 1., 0.])

    """
    labels = validator.validate_labels(labels)
    total = npairs(labels.shape[0])
    _check_allocation(total)
    logger.debug("comembership: %d labels, %d pairs", labels.shape[0], total)
    return _comembership.comembership(labels)


def comembership_table(labels1, labels2):
    """Tabulate how two clusterings of the same observations agree on pairs.

    Parameters
    ----------
    labels1, labels2 : (N,) array-like
        Numeric cluster labels for the same `N` observations.

    Returns
    -------
    table : comembership_table_result
        Named tuple of pair counts ``(n11, n10, n01, n00)``: comembers under
        both clusterings, only under `labels1`, only under `labels2`, and
        under neither. The counts sum to ``npairs(N)``.

    Notes
    -----
    The counts are accumulated pair by pair, so the comembership vectors are
    never materialised.

    """
    labels1 = validator.validate_labels(labels1, 'labels1')
    labels2 = validator.validate_labels(labels2, 'labels2')
    validator.validate_len(labels2, labels1.shape[0], 'labels2')
    npairs(labels1.shape[0])
    return comembership_table_result(
        *[int(c) for c in _comembership.table(labels1, labels2)])
