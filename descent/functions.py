"""
Analytical test objectives with known optima.

Each objective writes its expression over the symbolic parameter vector it is
given, so the same instance works for any dimension and can be
default-constructed by an optimizer.
"""

from typing import Sequence, Tuple
import numpy as np
import sympy


class AnalyticalFunction:
    """Base class for analytical test objectives."""

    name = "analytical"

    def objective_function(self, x: Sequence[sympy.Symbol]) -> sympy.Expr:
        """
        Build the objective expression.

        Args:
            x: Symbolic parameter vector

        Returns:
            SymPy expression over ``x``
        """
        raise NotImplementedError

    def get_optimum(self, dimension: int) -> Tuple[np.ndarray, float]:
        """
        Get known global optimum.

        Returns:
            (optimal_x, optimal_value) tuple
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Sphere(AnalyticalFunction):
    """
    Sphere function - simplest optimization benchmark.

    f(x) = sum_{i=1}^{n} x_i^2

    Global minimum: f(0, 0, ..., 0) = 0
    """

    name = "sphere"

    def objective_function(self, x):
        return sympy.Add(*[xi**2 for xi in x])

    def get_optimum(self, dimension):
        return np.zeros(dimension), 0.0


class Rosenbrock(AnalyticalFunction):
    """
    Rosenbrock function - classic optimization benchmark.

    f(x) = sum_{i=1}^{n-1} [100(x_{i+1} - x_i^2)^2 + (1 - x_i)^2]

    Global minimum: f(1, 1, ..., 1) = 0

    Properties:
    - Narrow curved valley
    - Easy to find valley, hard to converge to minimum
    """

    name = "rosenbrock"

    def objective_function(self, x):
        if len(x) < 2:
            raise ValueError("Rosenbrock needs at least 2 dimensions")
        return sympy.Add(*[
            100 * (x[i + 1] - x[i]**2)**2 + (1 - x[i])**2
            for i in range(len(x) - 1)
        ])

    def get_optimum(self, dimension):
        return np.ones(dimension), 0.0


class Constant(AnalyticalFunction):
    """Constant objective with zero gradient everywhere."""

    name = "constant"

    def __init__(self, value: float = 0.0):
        self.value = value

    def objective_function(self, x):
        return sympy.Float(self.value)

    def get_optimum(self, dimension):
        return np.zeros(dimension), float(self.value)

    def __repr__(self) -> str:
        return f"Constant(value={self.value})"


_FUNCTIONS = {cls.name: cls for cls in (Sphere, Rosenbrock, Constant)}


def get_analytical_function(name: str) -> AnalyticalFunction:
    """
    Get analytical test function by name.

    Args:
        name: Function name ("sphere", "rosenbrock", "constant")

    Returns:
        AnalyticalFunction instance

    Raises:
        ValueError: If function name not recognized
    """
    cls = _FUNCTIONS.get(name.strip().lower())
    if cls is None:
        raise ValueError(
            f"Unknown function: {name}. Available: {', '.join(sorted(_FUNCTIONS))}"
        )
    return cls()


def list_analytical_functions():
    return sorted(_FUNCTIONS)
