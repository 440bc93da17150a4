"""
Objective evaluation adapter.

Turns an objective's symbolic expression into fast numeric evaluators for the
value and the gradient. Uses SymPy for differentiation and lambdify (numpy
backend) for compilation.

Usage:
    compiled = compile_objective(Rosenbrock(), dimension=2)
    compiled.value([1.0, 1.0])      # 0.0
    compiled.gradient([0.0, 0.0])   # array([-2., 0.])
"""

from typing import Any, Sequence, Tuple
import logging

import numpy as np
import sympy

logger = logging.getLogger(__name__)


def parameter_vector(dimension: int) -> Tuple[sympy.Symbol, ...]:
    """
    Create the symbolic parameter vector handed to ``objective_function``.

    Args:
        dimension: Number of parameters

    Returns:
        Tuple of real symbols ``x0 .. x{dimension-1}``
    """
    if dimension < 1:
        raise ValueError(f"dimension must be positive, got {dimension}")
    return tuple(sympy.Symbol(f"x{i}", real=True) for i in range(dimension))


class CompiledObjective:
    """
    Compiled value and gradient evaluators for one symbolic expression.

    Both evaluators are pure functions of the point. Overflow and invalid
    operation warnings are silenced so non-finite values come back as
    ``inf`` / ``nan`` for the optimizers to inspect.
    """

    def __init__(self, expression: Any, variables: Sequence[sympy.Symbol]):
        """
        Initialize compiled objective.

        Args:
            expression: SymPy expression (or plain number) over ``variables``
            variables: Symbols the expression is written in
        """
        self.variables = tuple(variables)
        self.expression = sympy.sympify(expression)
        self.gradient_expressions = [sympy.diff(self.expression, v) for v in self.variables]

        self._value = sympy.lambdify(self.variables, self.expression, modules="numpy")
        self._gradient = sympy.lambdify(self.variables, self.gradient_expressions, modules="numpy")

    @property
    def dimension(self) -> int:
        return len(self.variables)

    def _unpack(self, point) -> np.ndarray:
        point = np.asarray(point, dtype=float)
        if point.shape != (self.dimension,):
            raise ValueError(
                f"Expected point of dimension {self.dimension}, got shape {point.shape}"
            )
        return point

    def value(self, point) -> float:
        """Evaluate the objective at ``point``."""
        point = self._unpack(point)
        with np.errstate(all="ignore"):
            return float(self._value(*point))

    def gradient(self, point) -> np.ndarray:
        """Evaluate the gradient at ``point`` as a new float array."""
        point = self._unpack(point)
        with np.errstate(all="ignore"):
            return np.array(self._gradient(*point), dtype=float)


def compile_objective(function: Any, dimension: int) -> CompiledObjective:
    """
    Build the symbolic expression of ``function`` and compile it.

    Args:
        function: Object exposing ``objective_function(x)``
        dimension: Dimensionality of the parameter vector

    Returns:
        CompiledObjective for the expression
    """
    variables = parameter_vector(dimension)
    expression = function.objective_function(variables)
    compiled = CompiledObjective(expression, variables)
    logger.debug(f"Compiled objective of dimension {dimension}: {compiled.expression}")
    return compiled
