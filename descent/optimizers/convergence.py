"""
Per-step improvement test shared by all optimizers.
"""

import numpy as np


class ImprovementMonitor:
    """
    Counts consecutive iterations without sufficient improvement.

    A step is insufficient when the relative improvement
    ``next / current > 1 - min_relative`` or the absolute improvement
    ``current - next < min_absolute``. The ratio uses IEEE division, so a
    zero current value never raises.
    """

    def __init__(
        self,
        min_absolute_per_step_improvement: float,
        min_relative_per_step_improvement: float,
        no_improvement_steps_to_terminate: float,
    ):
        self.min_absolute = min_absolute_per_step_improvement
        self.min_relative = min_relative_per_step_improvement
        self.steps_to_terminate = no_improvement_steps_to_terminate
        self.no_improvement_steps = 0

    @classmethod
    def from_config(cls, config) -> "ImprovementMonitor":
        return cls(
            config.min_absolute_per_step_improvement,
            config.min_relative_per_step_improvement,
            config.no_improvement_steps_to_terminate,
        )

    def is_insufficient(self, current_value: float, next_value: float) -> bool:
        with np.errstate(all="ignore"):
            ratio = np.divide(next_value, current_value)
        return bool(
            ratio > 1.0 - self.min_relative
            or current_value - next_value < self.min_absolute
        )

    def should_terminate(self, current_value: float, next_value: float) -> bool:
        """
        Record one step and report whether the loop should stop.

        Args:
            current_value: Objective value before the step
            next_value: Objective value of the proposed next point

        Returns:
            True once the insufficient-step streak reaches the limit
        """
        if self.is_insufficient(current_value, next_value):
            self.no_improvement_steps += 1
            return self.no_improvement_steps >= self.steps_to_terminate
        self.no_improvement_steps = 0
        return False
