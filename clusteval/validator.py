"""Argument validation helpers shared by the public modules.

Each helper raises immediately with a message naming the offending
parameter, so that nothing is allocated or computed for bad input.

"""

import numbers

import numpy as np


def _name(param_name):
    return param_name if param_name is not None else 'value'


def validate_integer(x, param_name=None):
    # bool is an Integral, but never a meaningful count
    if isinstance(x, bool) or not isinstance(x, numbers.Integral):
        raise ValueError("{} must be an integer, got {!r}".format(
            _name(param_name), x))


def validate_len(obj, expected, param_name=None):
    if len(obj) != expected:
        raise ValueError("{} must have length {}, got {}".format(
            _name(param_name), expected, len(obj)))


def validate_positive(x, param_name=None):
    if not x > 0:
        raise ValueError("{} must be positive, got {!r}".format(
            _name(param_name), x))


def validate_nonnegative(x, param_name=None):
    if not x >= 0:
        raise ValueError("{} must be non-negative, got {!r}".format(
            _name(param_name), x))


def validate_in(x, choices, param_name=None):
    if x not in choices:
        raise ValueError("{} must be one of {}, got {!r}".format(
            _name(param_name), sorted(choices), x))


def validate_labels(labels, param_name='labels'):
    """Coerce `labels` into a 1-D, C-contiguous float64 array.

    Parameters
    ----------
    labels : array-like
        Numeric (or boolean) cluster labels.
    param_name : str

    Returns
    -------
    labels : (N,) ndarray of float64
        A view of the input when no conversion is needed, otherwise a copy.
        The caller must not write to it.

    """
    arr = np.asarray(labels)
    if arr.dtype.kind not in 'biuf':
        raise TypeError("{} must be numeric, got dtype {}".format(
            param_name, arr.dtype))
    if arr.ndim != 1:
        raise ValueError("{} must be one-dimensional, got shape {}".format(
            param_name, arr.shape))
    return np.ascontiguousarray(arr, dtype=np.float64)
