"""
Nonlinear conjugate gradient (Polak-Ribiere-plus) with backtracking line search.
"""

import logging
import math

from ...numeric import dot_product, flip_sign, l2_norm, polak_ribiere, sum_vectors
from ..base import Optimizer
from ..convergence import ImprovementMonitor
from ..line_search import backtracking
from ..parameters import BacktrackingConfig
from ..result import OptimizationResult, TerminationReason, ValueAndPoint

logger = logging.getLogger(__name__)


class ConjugateGradientOptimizer(Optimizer):
    """
    Conjugate gradient optimizer.

    The search direction blends the previous direction with the new
    gradient using the Polak-Ribiere coefficient, clamped at zero so a
    negative (or undefined) coefficient restarts from steepest descent.
    A blended direction that is not a descent direction also restarts, so
    every line search runs downhill and objective values never increase.
    """

    name = "conjugate_gradient"
    config_class = BacktrackingConfig

    def optimize(self, starting_point) -> OptimizationResult:
        config: BacktrackingConfig = self.config
        point, f, g = self._prepare(starting_point)

        current = ValueAndPoint(f(point), point)
        current_gradient = g(current.point)
        s = flip_sign(current_gradient.copy())  # First step against the gradient

        logger.info(f"ConjugateGradientOptimizer: Begin at {point.tolist()}")

        monitor = ImprovementMonitor.from_config(config)
        termination = TerminationReason.MAX_STEPS
        history = []
        iterations = 0

        for iteration in range(config.max_steps):
            iterations = iteration + 1
            self._record(history, iterations, current)
            logger.debug(
                f"ConjugateGradientOptimizer: Iteration {iterations}, "
                f"OF = {current.value} @ {current.point.tolist()}"
            )

            next_point = backtracking(
                f, g, current.point, s,
                alpha=config.bt_alpha,
                beta=config.bt_beta,
                max_steps=config.bt_max_steps,
                value=current.value,
                gradient=current_gradient,
            )
            new_gradient = g(next_point.point)

            # NaN (zero previous gradient) fails the comparison and restarts too
            coefficient = polak_ribiere(new_gradient, current_gradient)
            omega = coefficient if coefficient > 0.0 else 0.0
            s = sum_vectors(s, new_gradient, ka=omega, kb=-1.0)
            if not dot_product(new_gradient, s) < 0.0:
                # Not a descent direction: restart from steepest descent
                s = flip_sign(new_gradient.copy())

            if monitor.should_terminate(current.value, next_point.value):
                logger.info("ConjugateGradientOptimizer: Terminating due to no improvement.")
                termination = TerminationReason.NO_IMPROVEMENT
                break

            current = next_point
            current_gradient = new_gradient

            if math.sqrt(l2_norm(s)) < config.grad_eps and iteration >= config.min_steps:
                logger.info("ConjugateGradientOptimizer: Terminating due to small search direction.")
                termination = TerminationReason.SMALL_GRADIENT
                break

        logger.info(f"ConjugateGradientOptimizer: Result = {current.point.tolist()}")
        logger.info(f"ConjugateGradientOptimizer: Objective function = {current.value}")

        return OptimizationResult.from_value_and_point(
            current,
            iterations=iterations,
            termination=termination,
            n_function_evals=f.n_evals,
            n_gradient_evals=g.n_evals,
            history=tuple(history),
        )
