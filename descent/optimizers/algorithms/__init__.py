"""
Optimizer implementations.
"""

from .gradient_descent import GradientDescentOptimizer
from .gradient_descent_bt import GradientDescentOptimizerBT
from .conjugate_gradient import ConjugateGradientOptimizer

__all__ = [
    "GradientDescentOptimizer",
    "GradientDescentOptimizerBT",
    "ConjugateGradientOptimizer",
]
