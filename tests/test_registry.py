"""
Tests for the optimizer registry and analytical function lookup.
"""

import pytest

from descent.functions import Rosenbrock, Sphere, get_analytical_function
from descent.optimizers import (
    ConjugateGradientOptimizer,
    GradientDescentOptimizer,
    GradientDescentOptimizerBT,
    OptimizerRegistry,
    Ownership,
    create_optimizer,
    get_optimizer_class,
    list_optimizers,
)


class TestOptimizerRegistry:

    def test_lookup_by_name(self):
        assert get_optimizer_class("gradient_descent") is GradientDescentOptimizer
        assert get_optimizer_class("gradient_descent_bt") is GradientDescentOptimizerBT
        assert get_optimizer_class("conjugate_gradient") is ConjugateGradientOptimizer

    def test_lookup_is_case_insensitive(self):
        assert get_optimizer_class(" Conjugate_Gradient ") is ConjugateGradientOptimizer

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available: gradient_descent"):
            get_optimizer_class("newton")

    def test_list_optimizers(self):
        optimizers = list_optimizers()
        assert set(optimizers) == {"gradient_descent", "gradient_descent_bt", "conjugate_gradient"}
        assert optimizers["gradient_descent"]["defaults"]["max_steps"] == 5000
        assert optimizers["conjugate_gradient"]["defaults"]["bt_beta"] == 0.8
        assert optimizers["gradient_descent_bt"]["class"] == "GradientDescentOptimizerBT"

    def test_separate_registry_initializes_lazily(self):
        registry = OptimizerRegistry()
        assert registry.names() == ["gradient_descent", "gradient_descent_bt", "conjugate_gradient"]

    def test_create_optimizer(self):
        optimizer = create_optimizer("gradient_descent", Sphere, {"max_steps": 3})
        assert isinstance(optimizer, GradientDescentOptimizer)
        assert optimizer.ownership == Ownership.OWNED
        assert optimizer.config.max_steps == 3


class TestAnalyticalFunctions:

    def test_lookup(self):
        assert isinstance(get_analytical_function("Sphere"), Sphere)
        assert isinstance(get_analytical_function("rosenbrock"), Rosenbrock)

    def test_unknown_function(self):
        with pytest.raises(ValueError, match="Unknown function"):
            get_analytical_function("ackley")

    def test_optimum(self):
        x_opt, f_opt = Rosenbrock().get_optimum(3)
        assert x_opt.tolist() == [1.0, 1.0, 1.0]
        assert f_opt == 0.0

    def test_rosenbrock_needs_two_dimensions(self):
        with pytest.raises(ValueError):
            GradientDescentOptimizer(Rosenbrock).optimize([1.0])
