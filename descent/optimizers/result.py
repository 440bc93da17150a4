"""
Result types shared by all optimizers.

ValueAndPoint pairs an objective value with the point it was evaluated at and
orders by value, so ``min()`` picks the better candidate. OptimizationResult
is the immutable ValueAndPoint returned to callers, with run statistics.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple
import numpy as np


class TerminationReason(str, Enum):
    """Why an optimization loop stopped."""

    MAX_STEPS = "max_steps"
    NO_IMPROVEMENT = "no_improvement"
    SMALL_GRADIENT = "small_gradient"


@dataclass(frozen=True, eq=False)
class ValueAndPoint:
    """Objective value at a point. Comparisons look at ``value`` only."""

    value: float
    point: np.ndarray

    def __post_init__(self):
        point = np.array(self.point, dtype=float)
        point.setflags(write=False)
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "point", point)

    def __lt__(self, other: "ValueAndPoint") -> bool:
        return self.value < other.value

    def __le__(self, other: "ValueAndPoint") -> bool:
        return self.value <= other.value

    def __gt__(self, other: "ValueAndPoint") -> bool:
        return self.value > other.value

    def __ge__(self, other: "ValueAndPoint") -> bool:
        return self.value >= other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueAndPoint):
            return NotImplemented
        return self.value == other.value and np.array_equal(self.point, other.point)


@dataclass(frozen=True, eq=False)
class OptimizationResult(ValueAndPoint):
    """
    Result of one ``optimize`` call.

    ``value`` and ``point`` hold the final iterate. The remaining fields
    describe how the run went.
    """

    iterations: int = 0
    termination: TerminationReason = TerminationReason.MAX_STEPS
    n_function_evals: int = 0
    n_gradient_evals: int = 0

    # Per-iteration state at the start of each iteration
    history: Tuple[Dict[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def from_value_and_point(cls, current: ValueAndPoint, **stats) -> "OptimizationResult":
        """Wrap the final iterate of a run."""
        return cls(value=current.value, point=current.point, **stats)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for display or JSON output.

        Truncates history to the last 20 entries.
        """
        return {
            "value": self.value,
            "point": self.point.tolist(),
            "iterations": self.iterations,
            "termination": self.termination.value,
            "n_function_evals": self.n_function_evals,
            "n_gradient_evals": self.n_gradient_evals,
            "history": list(self.history[-20:]),
        }
