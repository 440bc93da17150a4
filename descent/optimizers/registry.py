"""
Optimizer registry.

Maps optimizer names (as used in run files and on the command line) to
optimizer classes.
"""

from typing import Any, Dict, List, Mapping, Optional, Type, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .base import Optimizer

logger = logging.getLogger(__name__)


class OptimizerRegistry:
    """
    Registry for optimizer classes.

    Usage:
        registry = OptimizerRegistry()
        cls = registry.get("conjugate_gradient")
    """

    def __init__(self):
        """Initialize empty registry."""
        self._optimizers: Dict[str, Type["Optimizer"]] = {}
        self._initialized = False

    def register(self, optimizer_class: Type["Optimizer"]) -> None:
        self._optimizers[optimizer_class.name] = optimizer_class
        logger.debug(f"Registered optimizer: {optimizer_class.name}")

    def get(self, name: str) -> Type["Optimizer"]:
        """
        Get optimizer class by name (case-insensitive).

        Raises:
            ValueError: If the name is not registered
        """
        self._ensure_initialized()
        optimizer_class = self._optimizers.get(name.strip().lower())
        if optimizer_class is None:
            raise ValueError(
                f"Unknown optimizer: {name}. Available: {', '.join(self.names())}"
            )
        return optimizer_class

    def names(self) -> List[str]:
        self._ensure_initialized()
        return list(self._optimizers)

    def list_all(self) -> Dict[str, Dict[str, Any]]:
        """
        List all optimizers with their default settings.

        Returns:
            Dict mapping optimizer name to info dict
        """
        self._ensure_initialized()
        return {
            name: {
                "class": cls.__name__,
                "defaults": cls.config_class().to_dict(),
            }
            for name, cls in self._optimizers.items()
        }

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self._initialize_optimizers()
            self._initialized = True

    def _initialize_optimizers(self) -> None:
        # Import here to avoid circular imports
        from .algorithms import (
            ConjugateGradientOptimizer,
            GradientDescentOptimizer,
            GradientDescentOptimizerBT,
        )

        self.register(GradientDescentOptimizer)
        self.register(GradientDescentOptimizerBT)
        self.register(ConjugateGradientOptimizer)


# Global registry instance
_REGISTRY: Optional[OptimizerRegistry] = None


def get_registry() -> OptimizerRegistry:
    """Get the global optimizer registry."""
    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = OptimizerRegistry()
    return _REGISTRY


def get_optimizer_class(name: str) -> Type["Optimizer"]:
    return get_registry().get(name)


def list_optimizers() -> Dict[str, Dict[str, Any]]:
    return get_registry().list_all()


def create_optimizer(
    name: str,
    function: Any,
    parameters: Optional[Mapping[str, float]] = None,
    record_history: bool = True,
) -> "Optimizer":
    """
    Build an optimizer by name.

    Args:
        name: Registered optimizer name
        function: Objective class or instance (see Optimizer)
        parameters: Optional parameter overrides
        record_history: Keep per-iteration history in the result

    Returns:
        Optimizer instance
    """
    return get_optimizer_class(name)(
        function, parameters=parameters, record_history=record_history
    )
