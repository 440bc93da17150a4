"""
Optimizers for unconstrained minimization.

Provides a small family of interchangeable descent algorithms:
- base.py: Optimizer abstract base class and objective ownership
- result.py: ValueAndPoint, OptimizationResult
- parameters.py: OptimizerParameters and typed configs
- line_search.py: Backtracking line search
- registry.py: Lookup by name
- algorithms/: The optimizer implementations

Usage:
    from descent.optimizers import ConjugateGradientOptimizer

    result = ConjugateGradientOptimizer(Rosenbrock).optimize([-1.2, 1.0])
    print(result.value, result.point)
"""

# Core abstractions
from descent.optimizers.base import Optimizer, Ownership
from descent.optimizers.result import OptimizationResult, TerminationReason, ValueAndPoint
from descent.optimizers.parameters import (
    OptimizerParameters,
    GradientDescentConfig,
    BacktrackingConfig,
)
from descent.optimizers.line_search import backtracking

# Registry functions
from descent.optimizers.registry import (
    OptimizerRegistry,
    create_optimizer,
    get_optimizer_class,
    get_registry,
    list_optimizers,
)

# Optimizer implementations
from descent.optimizers.algorithms import (
    GradientDescentOptimizer,
    GradientDescentOptimizerBT,
    ConjugateGradientOptimizer,
)

__all__ = [
    # Core abstractions
    "Optimizer",
    "Ownership",
    "OptimizationResult",
    "TerminationReason",
    "ValueAndPoint",
    "OptimizerParameters",
    "GradientDescentConfig",
    "BacktrackingConfig",
    "backtracking",
    # Registry
    "OptimizerRegistry",
    "create_optimizer",
    "get_optimizer_class",
    "get_registry",
    "list_optimizers",
    # Optimizers
    "GradientDescentOptimizer",
    "GradientDescentOptimizerBT",
    "ConjugateGradientOptimizer",
]
