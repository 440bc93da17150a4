"""
Pydantic schemas for run requests coming from files or the command line.

This is the only place where parameters travel as a free-form string-keyed
map. Values are validated and coerced here, then handed to optimizers as an
OptimizerParameters snapshot.
"""

from typing import Dict, List, Union
import math

from pydantic import BaseModel, Field, field_validator

from .functions import list_analytical_functions
from .optimizers.parameters import OptimizerParameters
from .optimizers.registry import get_registry


def coerce_parameter_value(name: str, value: Union[str, int, float]) -> float:
    """
    Coerce one parameter value to float.

    Accepts numbers and numeric strings ("5", "1e-8"). Booleans are rejected
    even though Python treats them as integers, and so are "inf" and "nan".

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Parameter '{name}' must be numeric, got bool")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise ValueError(f"Parameter '{name}' must be finite, got {value}")
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            raise ValueError(f"Parameter '{name}' must be numeric, got '{value}'")
    else:
        raise ValueError(f"Parameter '{name}' must be numeric, got {type(value).__name__}")
    if not math.isfinite(number):
        raise ValueError(f"Parameter '{name}' must be finite, got {value}")
    return number


class OptimizationRequest(BaseModel):
    """One optimization run: which optimizer, which objective, where to start."""

    optimizer: str = Field(default="conjugate_gradient", description="Registered optimizer name")
    function: str = Field(default="sphere", description="Analytical function name")
    starting_point: List[float] = Field(min_length=1, description="Initial point")
    parameters: Dict[str, float] = Field(default_factory=dict, description="Parameter overrides")

    @field_validator("optimizer", mode="before")
    @classmethod
    def check_optimizer(cls, v):
        name = str(v).strip().lower()
        if name not in get_registry().names():
            raise ValueError(
                f"Unknown optimizer '{v}'. Available: {', '.join(get_registry().names())}"
            )
        return name

    @field_validator("function", mode="before")
    @classmethod
    def check_function(cls, v):
        name = str(v).strip().lower()
        if name not in list_analytical_functions():
            raise ValueError(
                f"Unknown function '{v}'. Available: {', '.join(list_analytical_functions())}"
            )
        return name

    @field_validator("parameters", mode="before")
    @classmethod
    def coerce_parameters(cls, v):
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("parameters must be a mapping of name to number")
        return {str(k): coerce_parameter_value(str(k), value) for k, value in v.items()}

    def to_parameters(self) -> OptimizerParameters:
        return OptimizerParameters(self.parameters)
