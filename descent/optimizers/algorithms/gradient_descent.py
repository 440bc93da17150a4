"""
Naive gradient descent that tries three step sizes in each iteration.
"""

import logging

from ...exceptions import OptimizationError
from ...numeric import is_normal, sum_vectors
from ..base import Optimizer
from ..convergence import ImprovementMonitor
from ..parameters import GradientDescentConfig
from ..result import OptimizationResult, TerminationReason, ValueAndPoint

logger = logging.getLogger(__name__)


class GradientDescentOptimizer(Optimizer):
    """
    Gradient descent over a fixed set of trial steps.

    Each iteration moves against the gradient by 0.01, 0.05 and 0.2 times
    its length and keeps the best finite candidate (or stays put if none is
    better). Fails with OptimizationError when no trial step gives a finite
    objective value.
    """

    name = "gradient_descent"
    config_class = GradientDescentConfig

    TRIAL_STEPS = (0.01, 0.05, 0.2)

    def optimize(self, starting_point) -> OptimizationResult:
        config: GradientDescentConfig = self.config
        point, f, g = self._prepare(starting_point)

        logger.info(f"GradientDescentOptimizer: Begin at {point.tolist()}")
        current = ValueAndPoint(f(point), point)
        logger.info(f"GradientDescentOptimizer: Original objective function = {current.value}")

        monitor = ImprovementMonitor.from_config(config)
        termination = TerminationReason.MAX_STEPS
        history = []
        iterations = 0

        for iteration in range(config.max_steps):
            iterations = iteration + 1
            self._record(history, iterations, current)
            logger.debug(
                f"GradientDescentOptimizer: Iteration {iterations}, "
                f"OF = {current.value} @ {current.point.tolist()}"
            )

            gradient = g(current.point)
            best_candidate = current
            has_valid_candidate = False
            for step in self.TRIAL_STEPS:
                candidate_point = sum_vectors(current.point, gradient, kb=-step)
                value = f(candidate_point)
                if is_normal(value):
                    has_valid_candidate = True
                    logger.debug(f"GradientDescentOptimizer: Value {value} at step {step}")
                    best_candidate = min(best_candidate, ValueAndPoint(value, candidate_point))

            if not has_valid_candidate:
                raise OptimizationError(
                    f"No valid candidate at iteration {iterations}: "
                    f"objective is not finite at any trial step {self.TRIAL_STEPS}",
                    iteration=iterations,
                    point=current.point,
                )

            if monitor.should_terminate(current.value, best_candidate.value):
                logger.info("GradientDescentOptimizer: Terminating due to no improvement.")
                termination = TerminationReason.NO_IMPROVEMENT
                break

            current = best_candidate

        logger.info(f"GradientDescentOptimizer: Result = {current.point.tolist()}")
        logger.info(f"GradientDescentOptimizer: Objective function = {current.value}")

        return OptimizationResult.from_value_and_point(
            current,
            iterations=iterations,
            termination=termination,
            n_function_evals=f.n_evals,
            n_gradient_evals=g.n_evals,
            history=tuple(history),
        )
