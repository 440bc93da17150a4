"""
Tests for OptimizerParameters and the typed configs.
"""

import dataclasses

import pytest

from descent.optimizers.parameters import (
    BacktrackingConfig,
    GradientDescentConfig,
    OptimizerParameters,
)


class TestOptimizerParameters:
    """Test the string-keyed parameter store."""

    def test_unset_name_returns_default(self):
        params = OptimizerParameters()
        assert params.get_value("max_steps", 5000) == 5000
        assert params.get_value("bt_beta", 0.8) == 0.8

    def test_set_overwrites(self):
        params = OptimizerParameters()
        params.set_value("max_steps", 10)
        params.set_value("max_steps", 20)
        assert params.get_value("max_steps", 5000) == 20

    def test_int_written_read_as_float(self):
        params = OptimizerParameters()
        params.set_value("grad_eps", 1)
        value = params.get_value("grad_eps", 1e-8)
        assert value == 1.0
        assert isinstance(value, float)

    def test_float_written_read_as_int_truncates(self):
        params = OptimizerParameters()
        params.set_value("max_steps", 2.7)
        value = params.get_value("max_steps", 5000)
        assert value == 2
        assert isinstance(value, int)

    def test_non_numeric_value_rejected(self):
        params = OptimizerParameters()
        with pytest.raises(TypeError, match="must be numeric"):
            params.set_value("max_steps", "10")

    def test_non_numeric_default_rejected(self):
        params = OptimizerParameters()
        with pytest.raises(TypeError):
            params.get_value("max_steps", "10")

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_value_rejected(self, value):
        params = OptimizerParameters()
        with pytest.raises(ValueError, match="must be finite"):
            params.set_value("max_steps", value)
        assert "max_steps" not in params

    def test_non_finite_initial_mapping_rejected(self):
        with pytest.raises(ValueError):
            OptimizerParameters({"bt_max_steps": float("inf")})

    def test_initial_mapping(self):
        params = OptimizerParameters({"min_steps": 0, "grad_eps": 1e10})
        assert "min_steps" in params
        assert "max_steps" not in params
        assert len(params) == 2
        assert params.to_dict() == {"min_steps": 0.0, "grad_eps": 1e10}


class TestConfigs:
    """Test translation of parameters into typed configs."""

    def test_gradient_descent_defaults(self):
        config = GradientDescentConfig()
        assert config.max_steps == 5000
        assert config.step_factor == 1.0
        assert config.min_absolute_per_step_improvement == 1e-25
        assert config.min_relative_per_step_improvement == 1e-25
        assert config.no_improvement_steps_to_terminate == 2

    def test_backtracking_defaults(self):
        config = BacktrackingConfig()
        assert config.min_steps == 3
        assert config.max_steps == 5000
        assert config.bt_alpha == 0.5
        assert config.bt_beta == 0.8
        assert config.bt_max_steps == 100
        assert config.grad_eps == 1e-8
        assert config.no_improvement_steps_to_terminate == 2

    def test_no_parameters_gives_defaults(self):
        assert BacktrackingConfig.from_parameters(None) == BacktrackingConfig()

    def test_overrides_and_unknown_names(self):
        params = OptimizerParameters({"max_steps": 10, "no_such_parameter": 1})
        config = GradientDescentConfig.from_parameters(params)
        assert config.max_steps == 10
        assert config.step_factor == 1.0

    def test_from_dict_coerces_types(self):
        config = BacktrackingConfig.from_dict({"bt_max_steps": 10.9, "bt_alpha": 1})
        assert config.bt_max_steps == 10
        assert isinstance(config.bt_max_steps, int)
        assert config.bt_alpha == 1.0
        assert isinstance(config.bt_alpha, float)

    def test_config_is_frozen(self):
        config = GradientDescentConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_steps = 1

    def test_to_dict(self):
        data = GradientDescentConfig().to_dict()
        assert set(data) == {
            "max_steps",
            "step_factor",
            "min_absolute_per_step_improvement",
            "min_relative_per_step_improvement",
            "no_improvement_steps_to_terminate",
        }
