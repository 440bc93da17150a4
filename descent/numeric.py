"""
Vector primitives shared by the optimizers and the line search.

All functions accept anything numpy can turn into a 1-D float array and
follow IEEE semantics: division by zero yields inf / NaN instead of raising.
"""

import numpy as np


def sum_vectors(a, b, ka: float = 1.0, kb: float = 1.0) -> np.ndarray:
    """
    Linear combination ``ka * a + kb * b``.

    Args:
        a: First vector
        b: Second vector, same dimension as ``a``
        ka: Coefficient for ``a``
        kb: Coefficient for ``b``

    Returns:
        New array with the combination

    Raises:
        ValueError: If the dimensions differ
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Dimension mismatch: {a.shape} vs {b.shape}")
    with np.errstate(all="ignore"):
        return ka * a + kb * b


def dot_product(a, b) -> float:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Dimension mismatch: {a.shape} vs {b.shape}")
    with np.errstate(all="ignore"):
        return float(np.dot(a, b))


def l2_norm(v) -> float:
    """Sum of squares of ``v``. Take the square root for the Euclidean norm."""
    return dot_product(v, v)


def flip_sign(v: np.ndarray) -> np.ndarray:
    """Negate every element of ``v`` in place and return it."""
    np.negative(v, out=v)
    return v


def is_normal(x: float) -> bool:
    """True iff ``x`` is finite (neither infinite nor NaN)."""
    return bool(np.isfinite(x))


def polak_ribiere(a, b) -> float:
    """
    Polak-Ribiere coefficient ``dot(a, a - b) / dot(b, b)``.

    Args:
        a: New gradient
        b: Previous gradient

    Returns:
        The coefficient; NaN or inf when ``b`` is the zero vector
    """
    numerator = dot_product(a, sum_vectors(a, b, kb=-1.0))
    denominator = l2_norm(b)
    with np.errstate(all="ignore"):
        return float(np.divide(numerator, denominator))
