"""
Optimizer parameters.

OptimizerParameters is the string-keyed override map accepted at the
boundary. Optimizers translate it into a typed, frozen config record
(GradientDescentConfig or BacktrackingConfig) before running, so algorithm
code only ever reads named fields.
"""

from dataclasses import dataclass, fields
import math
from numbers import Real
from typing import Any, Dict, Mapping, Optional, TypeVar, Union

Number = Union[int, float]
T = TypeVar("T", int, float)


def _check_numeric(name: str, value: Any) -> None:
    if not isinstance(value, Real):
        raise TypeError(
            f"Parameter '{name}' must be numeric, got {type(value).__name__}"
        )


class OptimizerParameters:
    """
    Named numeric overrides, stored as floats.

    Reads coerce to the type of the default, so a value set as ``2.7`` and
    read with an ``int`` default comes back as ``2``. Unset names yield the
    default.

    Usage:
        params = OptimizerParameters({"max_steps": 100})
        params.set_value("grad_eps", 1e-6)
        params.get_value("max_steps", 5000)  # 100
        params.get_value("bt_beta", 0.8)     # 0.8
    """

    def __init__(self, values: Optional[Mapping[str, Number]] = None):
        self._params: Dict[str, float] = {}
        for name, value in (values or {}).items():
            self.set_value(name, value)

    def set_value(self, name: str, value: Number) -> None:
        """
        Set ``name`` to ``value``, overwriting any previous value.

        Raises:
            TypeError: If ``value`` is not a real number
            ValueError: If ``value`` is infinite or NaN
        """
        _check_numeric(name, value)
        if not math.isfinite(value):
            raise ValueError(f"Parameter '{name}' must be finite, got {value}")
        self._params[name] = float(value)

    def get_value(self, name: str, default: T) -> T:
        """Return ``name`` coerced to ``type(default)``, or ``default`` if unset."""
        _check_numeric(name, default)
        if name in self._params:
            return type(default)(self._params[name])
        return default

    def to_dict(self) -> Dict[str, float]:
        return dict(self._params)

    def __contains__(self, name: str) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"OptimizerParameters({self._params!r})"


class _ConfigMixin:
    """Builds a typed config from an optional parameter snapshot."""

    @classmethod
    def from_parameters(cls, parameters: Optional[OptimizerParameters] = None):
        """
        Read every field from ``parameters``, falling back to the defaults.

        Names in ``parameters`` that are not fields of the config are ignored.
        """
        defaults = cls()
        if parameters is None:
            return defaults
        return cls(**{
            f.name: parameters.get_value(f.name, getattr(defaults, f.name))
            for f in fields(cls)
        })

    @classmethod
    def from_dict(cls, data: Mapping[str, Number]):
        return cls.from_parameters(OptimizerParameters(data))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class GradientDescentConfig(_ConfigMixin):
    """Settings for GradientDescentOptimizer."""

    max_steps: int = 5000                              # Maximum number of optimization steps
    step_factor: float = 1.0                           # Declared for compatibility, trial steps are fixed
    min_absolute_per_step_improvement: float = 1e-25
    min_relative_per_step_improvement: float = 1e-25
    no_improvement_steps_to_terminate: float = 2.0     # Consecutive insufficient steps before stopping


@dataclass(frozen=True)
class BacktrackingConfig(_ConfigMixin):
    """Settings for GradientDescentOptimizerBT and ConjugateGradientOptimizer."""

    min_steps: int = 3                                 # Iterations before gradient-norm early stopping applies
    max_steps: int = 5000
    bt_alpha: float = 0.5                              # Armijo sufficient-decrease factor
    bt_beta: float = 0.8                               # Step shrink factor
    bt_max_steps: int = 100                            # Maximum number of step shrinks
    grad_eps: float = 1e-8                             # Gradient magnitude for early stopping
    min_absolute_per_step_improvement: float = 1e-25
    min_relative_per_step_improvement: float = 1e-25
    no_improvement_steps_to_terminate: float = 2.0
