"""Multithreaded comembership.

Rows of the pair enumeration are independent and each row's slice of the
output starts at a closed-form offset (:func:`clusteval.comembership.row_offset`),
so the rows can be split into contiguous ranges and filled concurrently
into one shared, zero-initialised buffer without any locking. The compiled
kernel releases the GIL while it fills a range.

"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np

from clusteval import validator
from clusteval.comembership import (
    _check_allocation,
    index_pair,
    npairs,
    row_offset,
)
from clusteval.cxx import _comembership

logger = logging.getLogger(__name__)


def _first_row_at(target, n):
    # smallest row whose first pair index is >= target
    i, _ = index_pair(target, n)
    return i if row_offset(i, n) == target else i + 1


def partition_rows(n, nchunks):
    """Split rows ``0 .. n-1`` into contiguous ranges of similar pair counts.

    Parameters
    ----------
    n : int
        Number of observations.
    nchunks : int
        Upper bound on the number of ranges.

    Returns
    -------
    ranges : list of (start, stop) tuples
        Non-empty half-open row ranges covering ``0 .. n-1`` in order. At
        most ``min(nchunks, n - 1)`` ranges are returned when there are any
        pairs; a single range when there are none.

    """
    validator.validate_integer(nchunks, 'nchunks')
    validator.validate_positive(nchunks, 'nchunks')
    total = npairs(n)
    if n == 0:
        return []
    if total == 0:
        return [(0, n)]
    # the last row holds no pairs
    nchunks = min(nchunks, n - 1)
    bounds = [0]
    for k in range(1, nchunks):
        i = _first_row_at(total * k // nchunks, n)
        if i > bounds[-1]:
            bounds.append(i)
    bounds.append(n)
    return list(zip(bounds[:-1], bounds[1:]))


def comembership(labels, nworkers=None):
    """Compute the comembership vector using several threads.

    Produces exactly the same array as
    :func:`clusteval.comembership.comembership`.

    Parameters
    ----------
    labels : (N,) array-like
        Numeric cluster labels.
    nworkers : int, optional
        Number of worker threads. Defaults to the number of CPUs.

    Returns
    -------
    comembership : (N * (N - 1) / 2,) ndarray of float64

    """
    labels = validator.validate_labels(labels)
    if nworkers is None:
        nworkers = os.cpu_count() or 1
    validator.validate_integer(nworkers, 'nworkers')
    validator.validate_positive(nworkers, 'nworkers')

    n = labels.shape[0]
    total = npairs(n)
    _check_allocation(total)
    out = np.zeros(total, dtype=np.float64)
    if not out.shape[0]:
        return out

    chunks = partition_rows(n, nworkers)
    logger.debug("comembership: %d labels split into %d row ranges",
                 n, len(chunks))
    if len(chunks) == 1:
        _comembership.fill_rows(labels, out, 0, n)
        return out

    with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
        futures = [
            executor.submit(_comembership.fill_rows, labels, out, start, stop)
            for start, stop in chunks
        ]
        for future in as_completed(futures):
            future.result()
    return out
