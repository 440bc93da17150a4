"""
Abstract base class for optimizers.

All optimizers (gradient descent, gradient descent with backtracking,
conjugate gradient) implement this interface: they own or borrow one
objective instance, hold an optional parameter snapshot and minimize the
objective from a starting point.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Type, Union
import numpy as np

from ..differentiation import compile_objective
from .parameters import OptimizerParameters
from .result import OptimizationResult
from .wrapper import GradientWrapper, ObjectiveWrapper


class Ownership(str, Enum):
    """Who owns the objective instance an optimizer works with."""

    OWNED = "owned"        # Built by the optimizer
    BORROWED = "borrowed"  # Supplied by the caller, who keeps it alive


class Optimizer(ABC):
    """
    Abstract base class for optimizers.

    Construction modes:
        Optimizer(Sphere)                           # owns Sphere()
        Optimizer(Sphere, parameters=params)        # owns Sphere(), with parameters
        Optimizer(sphere)                           # borrows an existing instance
        Optimizer(sphere, parameters=params)
        Optimizer(Quadratic, 3.0, parameters=params)  # owns Quadratic(3.0)

    The objective must expose ``objective_function(x)``, taking a tuple of
    SymPy symbols and returning an expression.
    """

    #: Registry name, e.g. "conjugate_gradient"
    name: str = ""

    #: Typed config record built from the parameter snapshot
    config_class: Type = None

    def __init__(
        self,
        function: Any,
        *args,
        parameters: Optional[Union[OptimizerParameters, Mapping[str, float]]] = None,
        record_history: bool = True,
        **kwargs,
    ):
        """
        Initialize optimizer.

        Args:
            function: Objective class to instantiate, or an objective instance
            *args: Constructor arguments when ``function`` is a class
            parameters: Optional parameter overrides
            record_history: Keep one history entry per iteration in the result
            **kwargs: Constructor keyword arguments when ``function`` is a class

        Raises:
            TypeError: If constructor arguments accompany an instance, or the
                objective lacks ``objective_function``
        """
        if isinstance(function, type):
            self._function = function(*args, **kwargs)
            self._ownership = Ownership.OWNED
        else:
            if args or kwargs:
                raise TypeError(
                    "Constructor arguments can only be forwarded to an objective class, "
                    f"got an instance of {type(function).__name__}"
                )
            self._function = function
            self._ownership = Ownership.BORROWED

        if not callable(getattr(self._function, "objective_function", None)):
            raise TypeError(
                f"{type(self._function).__name__} does not define objective_function(x)"
            )

        # Snapshot, so later changes by the caller do not leak in
        self._parameters: Optional[OptimizerParameters] = None
        if parameters is not None:
            source = parameters.to_dict() if isinstance(parameters, OptimizerParameters) else parameters
            self._parameters = OptimizerParameters(source)

        self.record_history = record_history

    @property
    def function(self) -> Any:
        """The objective instance, owned or borrowed."""
        return self._function

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    @property
    def parameters(self) -> Optional[OptimizerParameters]:
        """Copy of the parameter snapshot, or None if none was given."""
        if self._parameters is None:
            return None
        return OptimizerParameters(self._parameters.to_dict())

    @property
    def config(self):
        """Typed config with the defaults overridden by the parameter snapshot."""
        return self.config_class.from_parameters(self._parameters)

    def _prepare(
        self, starting_point
    ) -> Tuple[np.ndarray, ObjectiveWrapper, GradientWrapper]:
        """Compile the objective for the dimension of ``starting_point``."""
        point = np.array(starting_point, dtype=float)
        if point.ndim != 1 or point.size == 0:
            raise ValueError(
                f"Starting point must be a non-empty 1-D vector, got shape {point.shape}"
            )
        compiled = compile_objective(self._function, point.size)
        return point, ObjectiveWrapper(compiled.value), GradientWrapper(compiled.gradient)

    def _record(self, history: list, iteration: int, current) -> None:
        """Append an iteration record unless history recording is off."""
        if self.record_history:
            history.append(self._history_entry(iteration, current))

    @staticmethod
    def _history_entry(iteration: int, current) -> dict:
        return {
            "iteration": iteration,
            "objective": current.value,
            "design": current.point.tolist(),
        }

    @abstractmethod
    def optimize(self, starting_point) -> OptimizationResult:
        """
        Minimize the objective from ``starting_point``.

        Args:
            starting_point: Initial point, any 1-D sequence of numbers

        Returns:
            OptimizationResult with the final value and point
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"function={type(self._function).__name__}, "
            f"ownership={self._ownership.value}, "
            f"parameters={self._parameters!r})"
        )
