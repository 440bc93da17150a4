"""
Exceptions raised by descent optimizers.
"""

from typing import Optional
import numpy as np


class OptimizationError(Exception):
    """Exception raised when an optimizer cannot produce a valid next point."""

    def __init__(
        self,
        message: str,
        iteration: Optional[int] = None,
        point: Optional[np.ndarray] = None,
    ):
        self.iteration = iteration
        self.point = point
        super().__init__(message)
