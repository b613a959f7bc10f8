from clusteval import validator

import numpy as np
import pytest


def test_validate_labels():
    labels = validator.validate_labels([3, 1, 2])
    assert labels.dtype == np.float64
    assert labels.flags['C_CONTIGUOUS']
    assert validator.validate_labels([]).shape == (0,)
    with pytest.raises(ValueError):
        validator.validate_labels(5.)
    with pytest.raises(TypeError):
        validator.validate_labels(np.array([object(), object()]))


def test_validate_integer():
    validator.validate_integer(3)
    validator.validate_integer(np.int64(3))
    for bad in (3.0, True, '3', None):
        with pytest.raises(ValueError):
            validator.validate_integer(bad, 'n')


def test_messages_name_the_parameter():
    with pytest.raises(ValueError, match='nworkers'):
        validator.validate_positive(0, 'nworkers')
    with pytest.raises(ValueError, match='rho'):
        validator.validate_len([1], 2, 'rho')
    with pytest.raises(ValueError, match='similarity'):
        validator.validate_in('x', {'rand': None}, 'similarity')
