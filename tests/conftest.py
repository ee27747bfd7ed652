"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def worked_example():
    """N=4, P=2 example: intercept + one predictor, b = 0."""
    X = np.array([[1.0, 0.0], [1.0, 1.0], [1.0, 2.0], [1.0, 3.0]])
    y = np.array([1.0, 2.0, 3.0, 4.0])
    b = np.zeros(2)
    return b, y, X


@pytest.fixture
def regression_data(rng):
    """Design with intercept column, noisy response, and a random point b."""
    n, k = 60, 3
    X = np.column_stack([np.ones(n), rng.standard_normal((n, k))])
    beta_true = np.array([0.5, 1.0, -2.0, 0.25])
    y = X @ beta_true + rng.standard_normal(n) * 0.3
    b = rng.standard_normal(k + 1)
    return b, y, X


@pytest.fixture
def orthogonal_design(rng):
    """
    n=100 predictors with (1/n) X'X = I and centered columns, plus
    an intercept column; response with known lasso solution.
    """
    n, k = 100, 3
    Z = np.column_stack([np.ones(n), rng.standard_normal((n, k))])
    Q, _ = np.linalg.qr(Z)
    predictors = Q[:, 1:] * np.sqrt(n)
    y = 2.0 + predictors @ np.array([1.5, -0.8, 0.05]) + rng.standard_normal(n) * 0.1
    return predictors, y
