"""Pair-counting similarity between two clusterings.

Both indices are computed from the comembership agreement table
(:func:`clusteval.comembership.comembership_table`).

"""

from clusteval import validator
from clusteval.comembership import comembership_table


def _jaccard(table):
    denom = table.n11 + table.n10 + table.n01
    if not denom:
        # neither clustering puts any pair together: they agree everywhere
        return 1.0
    return table.n11 / denom


def _rand(table):
    return (table.n11 + table.n00) / sum(table)


_SIMILARITIES = {
    'jaccard': _jaccard,
    'rand': _rand,
}


def cluster_similarity(labels1, labels2, similarity='jaccard'):
    """Similarity of two clusterings of the same observations.

    Parameters
    ----------
    labels1, labels2 : (N,) array-like
        Numeric cluster labels; ``N >= 2``.
    similarity : {'jaccard', 'rand'}
        ``'jaccard'`` is ``n11 / (n11 + n10 + n01)``, ``'rand'`` is
        ``(n11 + n00) / (N choose 2)``, with the counts from
        :func:`~clusteval.comembership.comembership_table`.

    Returns
    -------
    similarity : float
        In ``[0, 1]``; 1 when the two partitions are the same.

    """
    validator.validate_in(similarity, _SIMILARITIES, 'similarity')
    table = comembership_table(labels1, labels2)
    if not sum(table):
        raise ValueError(
            "cluster similarity needs at least two observations")
    return _SIMILARITIES[similarity](table)


def jaccard(labels1, labels2):
    return cluster_similarity(labels1, labels2, 'jaccard')


def rand(labels1, labels2):
    return cluster_similarity(labels1, labels2, 'rand')
