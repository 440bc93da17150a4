"""
Tests for backtracking line search.
"""

import numpy as np
import pytest

from descent.optimizers.line_search import backtracking
from descent.optimizers.wrapper import GradientWrapper, ObjectiveWrapper


def sphere(x):
    return float(np.sum(np.asarray(x) ** 2))


def sphere_gradient(x):
    return 2.0 * np.asarray(x, dtype=float)


def walled_parabola(x):
    """x^2 inside |x| <= 2, infinite outside."""
    if abs(x[0]) > 2.0:
        return float("inf")
    return float(x[0] ** 2)


class TestBacktracking:
    """Test the Armijo backtracking procedure."""

    def test_accepts_first_step_satisfying_armijo(self):
        """On x^2 from (1, 1) along -grad, t = 0.8^4 is the first accepted step."""
        point = np.array([1.0, 1.0])
        result = backtracking(sphere, sphere_gradient, point, -sphere_gradient(point))
        expected = 1.0 - 2.0 * 0.8**4
        assert result.point.tolist() == pytest.approx([expected, expected])
        assert result.value == pytest.approx(2.0 * expected**2)
        assert result.value < sphere(point)

    def test_full_step_when_immediately_sufficient(self):
        point = np.array([1.0])
        result = backtracking(sphere, sphere_gradient, point, np.array([-0.5]))
        assert result.point.tolist() == pytest.approx([0.5])

    def test_budget_exhaustion_returns_last_point(self):
        """Two shrinks allowed: the last tried step is t = 0.64."""
        point = np.array([1.0, 1.0])
        result = backtracking(
            sphere, sphere_gradient, point, -sphere_gradient(point), max_steps=2
        )
        expected = 1.0 - 2.0 * 0.64
        assert result.point.tolist() == pytest.approx([expected, expected])

    def test_zero_budget_returns_full_step(self):
        point = np.array([1.0, 1.0])
        result = backtracking(
            sphere, sphere_gradient, point, -sphere_gradient(point), max_steps=0
        )
        assert result.point.tolist() == pytest.approx([-1.0, -1.0])

    def test_non_finite_candidates_rejected(self):
        point = np.array([1.0])
        result = backtracking(walled_parabola, sphere_gradient, point, np.array([-5.0]))
        assert np.isfinite(result.value)
        assert abs(result.point[0]) <= 2.0
        assert result.value < 1.0

    def test_minus_infinity_candidates_rejected(self):
        def bottomless(x):
            return float("-inf") if abs(x[0]) > 2.0 else float(x[0] ** 2)

        result = backtracking(bottomless, sphere_gradient, np.array([1.0]), np.array([-5.0]))
        assert np.isfinite(result.value)
        assert abs(result.point[0]) <= 2.0
        assert result.value < 1.0

    def test_zero_direction_accepts_current_point(self):
        point = np.array([3.0])
        result = backtracking(lambda x: 5.0, lambda x: np.zeros(1), point, np.zeros(1))
        assert result.value == 5.0
        assert result.point.tolist() == [3.0]

    def test_known_value_and_gradient_skip_evaluation(self):
        point = np.array([1.0, 1.0])
        f = ObjectiveWrapper(sphere)
        g = GradientWrapper(sphere_gradient)
        backtracking(f, g, point, np.array([-2.0, -2.0]))
        assert f.n_evals == 6  # f(point) + five candidates
        assert g.n_evals == 1

        f = ObjectiveWrapper(sphere)
        g = GradientWrapper(sphere_gradient)
        backtracking(
            f, g, point, np.array([-2.0, -2.0]),
            value=2.0, gradient=np.array([2.0, 2.0]),
        )
        assert f.n_evals == 5
        assert g.n_evals == 0
