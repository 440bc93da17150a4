"""
Tests for the command-line interface.
"""

import io
import json

import pytest
from rich.console import Console

from descent.cli import CommandHandler, load_request_file
from descent.cli.__main__ import build_parser, build_request, main
from descent.schemas import OptimizationRequest


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


class TestCommandHandler:

    def test_run_displays_result(self, console):
        handler = CommandHandler(console)
        request = OptimizationRequest(
            optimizer="gradient_descent_bt", function="sphere", starting_point=[3.0, 4.0]
        )
        result = handler.handle_run(request)
        assert result.value == pytest.approx(0.0, abs=1e-6)
        output = console.file.getvalue()
        assert "gradient_descent_bt on sphere" in output
        assert "Termination" in output

    def test_list(self, console):
        CommandHandler(console).handle_list()
        output = console.file.getvalue()
        assert "conjugate_gradient" in output
        assert "GradientDescentOptimizerBT" in output


class TestRequestLoading:

    def test_yaml_file_with_overrides(self, tmp_path):
        config = tmp_path / "run.yaml"
        config.write_text(
            "optimizer: gradient_descent\n"
            "function: rosenbrock\n"
            "starting_point: [-1.2, 1.0]\n"
            "parameters:\n"
            "  max_steps: 100\n"
            "  min_relative_per_step_improvement: 1e-10\n"
        )
        args = build_parser().parse_args(
            ["run", "--config", str(config), "--optimizer", "conjugate_gradient",
             "--param", "max_steps=20"]
        )
        request = build_request(args)
        assert request.optimizer == "conjugate_gradient"
        assert request.function == "rosenbrock"
        assert request.starting_point == [-1.2, 1.0]
        assert request.parameters["max_steps"] == 20.0
        assert request.parameters["min_relative_per_step_improvement"] == 1e-10

    def test_json_file(self, tmp_path):
        config = tmp_path / "run.json"
        config.write_text(json.dumps({"function": "sphere", "starting_point": [1, 2]}))
        assert load_request_file(config) == {"function": "sphere", "starting_point": [1, 2]}

    def test_empty_yaml_file(self, tmp_path):
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert load_request_file(config) == {}

    def test_non_mapping_file(self, tmp_path):
        config = tmp_path / "list.yaml"
        config.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_request_file(config)

    def test_malformed_param(self):
        args = build_parser().parse_args(["run", "--start", "1", "--param", "max_steps"])
        with pytest.raises(ValueError, match="NAME=VALUE"):
            build_request(args)


class TestMain:

    def test_list(self):
        assert main(["list"]) == 0

    def test_run(self):
        code = main([
            "run", "--optimizer", "gradient_descent", "--function", "sphere",
            "--start", "3", "4", "--param", "max_steps=50",
        ])
        assert code == 0

    def test_invalid_request(self):
        assert main(["run", "--optimizer", "newton", "--start", "1"]) == 2

    def test_missing_starting_point(self):
        assert main(["run", "--function", "sphere"]) == 2

    def test_bad_param(self):
        assert main(["run", "--start", "1", "--param", "oops"]) == 1

    @pytest.mark.parametrize("value", ["inf", "nan"])
    def test_non_finite_param(self, value):
        code = main([
            "run", "--optimizer", "gradient_descent", "--start", "1", "1",
            "--param", f"max_steps={value}",
        ])
        assert code == 2

    def test_missing_config_file(self, tmp_path):
        assert main(["run", "--config", str(tmp_path / "missing.yaml")]) == 1
