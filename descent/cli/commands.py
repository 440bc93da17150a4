"""Command handlers for the CLI - run optimizers and display results."""

from pathlib import Path
from typing import Any, Dict
import json

import yaml
from rich.console import Console
from rich.table import Table

from ..functions import get_analytical_function
from ..optimizers.registry import create_optimizer, list_optimizers
from ..optimizers.result import OptimizationResult
from ..schemas import OptimizationRequest


def load_request_file(path: Path) -> Dict[str, Any]:
    """
    Load run settings from a YAML or JSON file.

    Args:
        path: File with keys of OptimizationRequest

    Returns:
        Mapping of the file contents (empty for an empty file)
    """
    text = Path(path).read_text()
    if Path(path).suffix.lower() == ".json":
        data = json.loads(text) if text.strip() else {}
    else:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


class CommandHandler:
    """
    Handles CLI commands.
    Validates requests, runs optimizers and renders results.
    """

    def __init__(self, console: Console):
        self.console = console

    def handle_run(self, request: OptimizationRequest) -> OptimizationResult:
        """Run one optimization and display the result."""
        function = get_analytical_function(request.function)
        optimizer = create_optimizer(request.optimizer, function, request.to_parameters())
        result = optimizer.optimize(request.starting_point)
        self.display_result(request, result)
        return result

    def handle_list(self):
        """Display all optimizers with their default settings."""
        table = Table(title="Optimizers")
        table.add_column("Name", style="cyan")
        table.add_column("Class")
        table.add_column("Defaults")

        for name, info in list_optimizers().items():
            defaults = ", ".join(f"{k}={v}" for k, v in info["defaults"].items())
            table.add_row(name, info["class"], defaults)

        self.console.print()
        self.console.print(table)
        self.console.print()

    def display_result(self, request: OptimizationRequest, result: OptimizationResult):
        table = Table(title=f"{request.optimizer} on {request.function}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right")

        x_str = ", ".join(f"{xi:.6g}" for xi in result.point[:6])
        if result.point.size > 6:
            x_str += f", ... ({result.point.size} dims)"

        table.add_row("Objective", f"{result.value:.6e}")
        table.add_row("Point", f"[{x_str}]")
        table.add_row("Iterations", str(result.iterations))
        table.add_row("Termination", result.termination.value)
        table.add_row("Function evals", str(result.n_function_evals))
        table.add_row("Gradient evals", str(result.n_gradient_evals))

        self.console.print()
        self.console.print(table)
        self.console.print()
