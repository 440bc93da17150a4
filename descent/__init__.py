"""
descent - unconstrained minimization of symbolic objectives

Usage:
    from descent import ConjugateGradientOptimizer, OptimizerParameters, Rosenbrock

    params = OptimizerParameters({"max_steps": 1000})
    result = ConjugateGradientOptimizer(Rosenbrock, parameters=params).optimize([-1.2, 1.0])
    print(result.value, result.point)

Objectives are plain classes exposing ``objective_function(x)``, where ``x``
is a tuple of SymPy symbols; gradients are derived symbolically.
"""

__version__ = "0.3.0"

from .exceptions import OptimizationError
from .differentiation import CompiledObjective, compile_objective, parameter_vector
from .functions import Constant, Rosenbrock, Sphere, get_analytical_function
from .optimizers import (
    BacktrackingConfig,
    ConjugateGradientOptimizer,
    GradientDescentConfig,
    GradientDescentOptimizer,
    GradientDescentOptimizerBT,
    OptimizationResult,
    Optimizer,
    OptimizerParameters,
    Ownership,
    TerminationReason,
    ValueAndPoint,
    create_optimizer,
    list_optimizers,
)

__all__ = [
    "OptimizationError",
    "CompiledObjective",
    "compile_objective",
    "parameter_vector",
    "Constant",
    "Rosenbrock",
    "Sphere",
    "get_analytical_function",
    "BacktrackingConfig",
    "ConjugateGradientOptimizer",
    "GradientDescentConfig",
    "GradientDescentOptimizer",
    "GradientDescentOptimizerBT",
    "OptimizationResult",
    "Optimizer",
    "OptimizerParameters",
    "Ownership",
    "TerminationReason",
    "ValueAndPoint",
    "create_optimizer",
    "list_optimizers",
]
