"""
Objective and gradient wrapper utilities.

Count evaluations of the compiled evaluators so every optimizer reports the
same statistics without duplicating bookkeeping.
"""

from typing import Callable
import numpy as np


class ObjectiveWrapper:
    """
    Wraps a value evaluator with evaluation counting.

    Usage:
        f = ObjectiveWrapper(compiled.value)
        f(point)
        print(f"Evaluations: {f.n_evals}")
    """

    def __init__(self, objective: Callable[[np.ndarray], float]):
        self.objective = objective
        self.n_evals = 0

    def __call__(self, x: np.ndarray) -> float:
        self.n_evals += 1
        return self.objective(x)


class GradientWrapper:
    """Wraps a gradient evaluator with evaluation counting."""

    def __init__(self, gradient: Callable[[np.ndarray], np.ndarray]):
        self.gradient = gradient
        self.n_evals = 0

    def __call__(self, x: np.ndarray) -> np.ndarray:
        self.n_evals += 1
        return self.gradient(x)
