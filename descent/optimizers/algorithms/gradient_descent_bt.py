"""
Gradient descent with backtracking line search.
"""

import logging
import math

from ...numeric import flip_sign, l2_norm
from ..base import Optimizer
from ..convergence import ImprovementMonitor
from ..line_search import backtracking
from ..parameters import BacktrackingConfig
from ..result import OptimizationResult, TerminationReason, ValueAndPoint

logger = logging.getLogger(__name__)


class GradientDescentOptimizerBT(Optimizer):
    """
    Steepest descent where each step length comes from backtracking.

    Stops early once the gradient norm drops below ``grad_eps`` after at
    least ``min_steps`` iterations.
    """

    name = "gradient_descent_bt"
    config_class = BacktrackingConfig

    def optimize(self, starting_point) -> OptimizationResult:
        config: BacktrackingConfig = self.config
        point, f, g = self._prepare(starting_point)

        current = ValueAndPoint(f(point), point)
        logger.info(f"GradientDescentOptimizerBT: Begin at {point.tolist()}")

        monitor = ImprovementMonitor.from_config(config)
        termination = TerminationReason.MAX_STEPS
        history = []
        iterations = 0

        for iteration in range(config.max_steps):
            iterations = iteration + 1
            self._record(history, iterations, current)
            logger.debug(
                f"GradientDescentOptimizerBT: Iteration {iterations}, "
                f"OF = {current.value} @ {current.point.tolist()}"
            )

            direction = g(current.point)
            if math.sqrt(l2_norm(direction)) < config.grad_eps and iteration >= config.min_steps:
                logger.info("GradientDescentOptimizerBT: Terminating due to small gradient norm.")
                termination = TerminationReason.SMALL_GRADIENT
                break

            gradient = direction.copy()
            flip_sign(direction)  # Against the gradient
            next_point = backtracking(
                f, g, current.point, direction,
                alpha=config.bt_alpha,
                beta=config.bt_beta,
                max_steps=config.bt_max_steps,
                value=current.value,
                gradient=gradient,
            )

            if monitor.should_terminate(current.value, next_point.value):
                logger.info("GradientDescentOptimizerBT: Terminating due to no improvement.")
                termination = TerminationReason.NO_IMPROVEMENT
                break

            current = next_point

        logger.info(f"GradientDescentOptimizerBT: Result = {current.point.tolist()}")
        logger.info(f"GradientDescentOptimizerBT: Objective function = {current.value}")

        return OptimizationResult.from_value_and_point(
            current,
            iterations=iterations,
            termination=termination,
            n_function_evals=f.n_evals,
            n_gradient_evals=g.n_evals,
            history=tuple(history),
        )
