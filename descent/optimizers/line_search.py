"""
Backtracking line search with the Armijo sufficient-decrease condition.

Shared by GradientDescentOptimizerBT and ConjugateGradientOptimizer.
"""

from typing import Callable, Optional
import logging
import numpy as np

from ..numeric import dot_product, is_normal, sum_vectors
from .result import ValueAndPoint

logger = logging.getLogger(__name__)


def backtracking(
    f: Callable[[np.ndarray], float],
    g: Callable[[np.ndarray], np.ndarray],
    point: np.ndarray,
    direction: np.ndarray,
    alpha: float = 0.5,
    beta: float = 0.8,
    max_steps: int = 100,
    value: Optional[float] = None,
    gradient: Optional[np.ndarray] = None,
) -> ValueAndPoint:
    """
    Shrink the step along ``direction`` until the Armijo condition holds.

    Starting from ``t = 1``, accepts ``point + t * direction`` once its value
    is finite and at most ``f(point) + alpha * t * dot(g(point), direction)``.
    Otherwise ``t`` is multiplied by ``beta``, at most ``max_steps`` times.
    When the budget runs out the last tried point is returned.

    Args:
        f: Objective evaluator
        g: Gradient evaluator
        point: Current point
        direction: Descent direction
        alpha: Sufficient-decrease factor in (0, 1)
        beta: Shrink factor in (0, 1)
        max_steps: Maximum number of shrinks
        value: ``f(point)`` if the caller already has it
        gradient: ``g(point)`` if the caller already has it

    Returns:
        ValueAndPoint at the accepted (or last tried) point
    """
    if value is None:
        value = f(point)
    if gradient is None:
        gradient = g(point)
    slope = alpha * dot_product(gradient, direction)

    t = 1.0
    candidate = sum_vectors(point, direction, kb=t)
    candidate_value = f(candidate)
    steps = 0
    while not (is_normal(candidate_value) and candidate_value <= value + t * slope):
        if steps >= max_steps:
            logger.debug(f"Backtracking: budget of {max_steps} steps exhausted at t = {t}")
            break
        t *= beta
        candidate = sum_vectors(point, direction, kb=t)
        candidate_value = f(candidate)
        steps += 1

    return ValueAndPoint(candidate_value, candidate)
