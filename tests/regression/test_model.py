"""
Tests for LeastSquaresModel, the adapter the optimization engines call.
"""

import numpy as np
import pytest

from pypenalized.core.capabilities import (
    ALL_CAPABILITIES,
    CAPABILITY_LOSS,
    CAPABILITY_GRADIENT,
    CAPABILITY_HESSIAN,
)
from pypenalized.core.exceptions import ShapeMismatchError, InvalidStepSizeError
from pypenalized.core.protocols import ScorableModel
from pypenalized.regression import LeastSquaresModel, sum_squared_error_gradient


@pytest.fixture
def model(worked_example):
    _, y, X = worked_example
    return LeastSquaresModel(y, X)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════

class TestConstruction:

    def test_dimensions(self, model):
        assert model.n_observations == 4
        assert model.n_parameters == 2

    def test_satisfies_protocol(self, model):
        assert isinstance(model, ScorableModel)

    def test_holds_private_copies(self, worked_example):
        _, y, X = worked_example
        model = LeastSquaresModel(y, X)
        y[0] = 100.0
        X[0, 1] = 100.0
        assert model.y[0] == 1.0
        assert model.X[0, 1] == 0.0

    def test_data_is_read_only(self, model):
        with pytest.raises(ValueError):
            model.X[0, 0] = 5.0
        with pytest.raises(ValueError):
            model.y[0] = 5.0

    def test_column_response_accepted(self, worked_example):
        _, y, X = worked_example
        model = LeastSquaresModel(y.reshape(-1, 1), X)
        assert model.y.shape == (4,)

    def test_response_length_mismatch(self, worked_example):
        _, y, X = worked_example
        with pytest.raises(ShapeMismatchError):
            LeastSquaresModel(y[:3], X)

    def test_1d_design_rejected(self, worked_example):
        _, y, _ = worked_example
        with pytest.raises(ShapeMismatchError):
            LeastSquaresModel(y, np.arange(4.0))

    def test_no_observations_rejected(self):
        with pytest.raises(ShapeMismatchError, match="at least one observation"):
            LeastSquaresModel(np.zeros(0), np.zeros((0, 2)))

    def test_repr(self, model):
        assert repr(model) == "LeastSquaresModel(n=4, p=2)"


# ═══════════════════════════════════════════════════════════════════════
# Capabilities
# ═══════════════════════════════════════════════════════════════════════

class TestCapabilities:

    @pytest.mark.parametrize("capability", [
        CAPABILITY_LOSS, CAPABILITY_GRADIENT, CAPABILITY_HESSIAN,
    ])
    def test_supported(self, model, capability):
        assert model.supports(capability)

    def test_all_capabilities(self, model):
        assert all(model.supports(c) for c in ALL_CAPABILITIES)

    def test_unsupported(self, model):
        assert not model.supports('fisher_information')


# ═══════════════════════════════════════════════════════════════════════
# Orientation
# ═══════════════════════════════════════════════════════════════════════

class TestOrientation:

    @pytest.mark.parametrize("shape", [(2,), (1, 2), (2, 1)])
    def test_loss_independent_of_orientation(self, model, shape):
        assert model.evaluate_loss(np.zeros(shape)) == pytest.approx(3.75)

    @pytest.mark.parametrize("shape", [(2,), (1, 2), (2, 1)])
    def test_gradient_returned_in_caller_orientation(self, model, shape):
        g = model.evaluate_gradient(np.zeros(shape))
        assert g.shape == shape
        np.testing.assert_allclose(g.reshape(-1), [-2.5, -5.0])

    def test_row_and_column_agree(self, regression_data):
        b, y, X = regression_data
        model = LeastSquaresModel(y, X)
        row = model.evaluate_gradient(b.reshape(1, -1))
        col = model.evaluate_gradient(b.reshape(-1, 1))
        flat = sum_squared_error_gradient(b, y, X)
        np.testing.assert_array_equal(row.ravel(), flat)
        np.testing.assert_array_equal(col.ravel(), flat)

    def test_matrix_parameters_rejected(self, model):
        with pytest.raises(ShapeMismatchError):
            model.evaluate_loss(np.zeros((2, 2)))

    def test_wrong_length_rejected(self, model):
        with pytest.raises(ShapeMismatchError):
            model.evaluate_gradient(np.zeros((1, 3)))

    def test_caller_parameters_untouched(self, model):
        b = np.array([[0.5, -0.5]])
        model.evaluate_gradient(b)
        model.approximate_hessian(b)
        np.testing.assert_array_equal(b, [[0.5, -0.5]])


# ═══════════════════════════════════════════════════════════════════════
# Hessian
# ═══════════════════════════════════════════════════════════════════════

class TestModelHessian:

    def test_default_step(self, regression_data):
        b, y, X = regression_data
        model = LeastSquaresModel(y, X)
        H = model.approximate_hessian(b)
        assert np.array_equal(H, H.T)
        np.testing.assert_allclose(H, X.T @ X / len(y), atol=1e-5)

    def test_row_vector_input(self, model):
        H = model.approximate_hessian(np.zeros((1, 2)), eps=1e-4)
        assert H.shape == (2, 2)

    def test_invalid_step(self, model):
        with pytest.raises(InvalidStepSizeError):
            model.approximate_hessian(np.zeros(2), eps=-1.0)
