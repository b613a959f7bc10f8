from clusteval.simulate import gen_normal, intraclass_cov

import numpy as np
import pytest

from numpy.testing import assert_allclose, assert_array_equal


def test_intraclass_cov():
    cov = intraclass_cov(3, 0.25, sigma2=2.)
    assert_allclose(np.diag(cov), 2.)
    assert_allclose(cov[0, 1], 0.5)
    assert_allclose(cov, cov.T)


def test_intraclass_cov_negative_rho_is_positive_definite():
    p = 5
    cov = intraclass_cov(p, -0.2)
    assert np.all(np.linalg.eigvalsh(cov) > 0)


def test_intraclass_cov_bad():
    with pytest.raises(ValueError):
        intraclass_cov(4, 1.0)
    with pytest.raises(ValueError):
        intraclass_cov(4, -1. / 3.)
    with pytest.raises(ValueError):
        intraclass_cov(4, 0.5, sigma2=0.)
    with pytest.raises(ValueError):
        intraclass_cov(0, 0.5)


def test_gen_normal_shapes():
    labels, X = gen_normal(n=[3, 4, 5], p=6, rho=[0.1, 0.2, 0.3], seed=0)
    assert X.shape == (12, 6)
    assert_array_equal(labels, [0] * 3 + [1] * 4 + [2] * 5)


def test_gen_normal_defaults():
    labels, X = gen_normal(seed=1)
    assert X.shape == (150, 100)
    assert_array_equal(np.bincount(labels), [10, 20, 30, 40, 50])


def test_gen_normal_seed():
    _, X1 = gen_normal(n=[5, 5], p=3, rho=[0.1, 0.5], seed=42)
    _, X2 = gen_normal(n=[5, 5], p=3, rho=[0.1, 0.5], seed=42)
    assert_array_equal(X1, X2)


def test_gen_normal_separation():
    n = [200, 200]
    labels, X = gen_normal(n=n, p=2, rho=[0.0, 0.0], delta=20.,
                           epsilon=0., sigma2=1., seed=3)
    means = np.array([X[labels == m].mean(axis=0) for m in range(2)])
    assert_allclose(means, [[20., 0.], [0., 20.]], atol=0.5)


def test_gen_normal_bad():
    with pytest.raises(ValueError):
        gen_normal(delta=-1.)
    with pytest.raises(ValueError):
        gen_normal(epsilon=-1.)
    with pytest.raises(ValueError):
        gen_normal(sigma2=0.)
    with pytest.raises(ValueError):
        gen_normal(n=[1, 2], rho=[0.1])
    with pytest.raises(ValueError):
        gen_normal(n=[1, 2, 3], p=2, rho=[0.1, 0.1, 0.1])
