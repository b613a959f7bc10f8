"""Simulated clustered data for exercising the comparison measures.

"""

import numpy as np

from clusteval import validator


def intraclass_cov(p, rho, sigma2=1.0):
    """Construct an intraclass covariance (correlation) matrix.

    ``Sigma = sigma2 * ((1 - rho) I_p + rho J_p)``, where ``I_p`` is the
    identity and ``J_p`` the matrix of ones.

    Parameters
    ----------
    p : int
        Dimension of the matrix.
    rho : float
        Intraclass correlation, ``-1 / (p - 1) < rho < 1``.
    sigma2 : float
        Positive variance.

    Returns
    -------
    cov : (p, p) ndarray

    """
    validator.validate_integer(p, 'p')
    validator.validate_positive(p, 'p')
    lower = -1.0 / (p - 1) if p > 1 else -np.inf
    if not lower < rho < 1:
        raise ValueError(
            "rho must be strictly between {} and 1, got {}".format(lower, rho))
    validator.validate_positive(sigma2, 'sigma2')
    return sigma2 * ((1.0 - rho) * np.eye(p) + rho * np.ones((p, p)))


def gen_normal(n=(10, 20, 30, 40, 50),
               p=100,
               rho=(0.1, 0.3, 0.5, 0.7, 0.9),
               delta=0.0,
               epsilon=0.1,
               sigma2=1.0,
               seed=None):
    """Generate observations from M multivariate normal populations.

    Population ``m`` has mean ``mu_m = delta * e_m + z_m``, where ``e_m`` is
    the m-th standard basis vector and ``z_m ~ N_p(0, epsilon * I_p)`` is
    noise that keeps the means from being perfectly regular, and covariance
    ``intraclass_cov(p, rho[m], sigma2)``.

    Parameters
    ----------
    n : sequence of int
        Sample size of each population; its length is M.
    p : int
        Dimension of the populations; must be at least M.
    rho : sequence of float
        Intraclass correlation of each population, same length as `n`.
    delta : float
        Non-negative distance scale between population means.
    epsilon : float
        Non-negative variance of the noise added to the means.
    sigma2 : float
        Positive variance coefficient of every covariance matrix.
    seed : None, int or numpy.random.Generator
        Passed to ``numpy.random.default_rng``.

    Returns
    -------
    labels : (sum(n),) ndarray of int
        Population index ``0 .. M-1`` of each observation.
    X : (sum(n), p) ndarray
        The generated observations, grouped by population.

    """
    validator.validate_nonnegative(delta, 'delta')
    validator.validate_nonnegative(epsilon, 'epsilon')
    validator.validate_positive(sigma2, 'sigma2')
    validator.validate_integer(p, 'p')
    validator.validate_positive(p, 'p')
    n = list(n)
    rho = list(rho)
    validator.validate_len(rho, len(n), 'rho')
    for m, size in enumerate(n):
        validator.validate_integer(size, 'n[{}]'.format(m))
        validator.validate_nonnegative(size, 'n[{}]'.format(m))
    M = len(n)
    if M > p:
        raise ValueError(
            "{} populations need dimension p >= {}, got {}".format(M, M, p))
    covs = [intraclass_cov(p, r, sigma2) for r in rho]

    r = np.random.default_rng(seed)
    z = r.multivariate_normal(np.zeros(p), epsilon * np.eye(p), size=M)
    means = delta * np.eye(M, p) + z

    labels = np.repeat(np.arange(M), n)
    X = np.empty((labels.shape[0], p))
    start = 0
    for m, size in enumerate(n):
        X[start:start + size] = r.multivariate_normal(
            means[m], covs[m], size=size)
        start += size
    return labels, X
