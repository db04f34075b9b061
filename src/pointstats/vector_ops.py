import math

import torch

from .errors import DegenerateVectorError, DimensionMismatchError

# Smallest positive normal float64; anything below it (or zero) is not "normal".
_TINY = torch.finfo(torch.float64).tiny


def is_normal(x: float) -> bool:
    """True when x is finite, non-zero and not subnormal."""
    x = float(x)
    return math.isfinite(x) and abs(x) >= _TINY


def normal_mask(values: torch.Tensor) -> torch.Tensor:
    """Elementwise `is_normal` for a tensor of magnitudes."""
    return torch.isfinite(values) & (values.abs() >= _TINY)


def _check_same_length(a: torch.Tensor, b: torch.Tensor):
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Vectors must have the same shape, got {tuple(a.shape)} and {tuple(b.shape)}"
        )


def add(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    _check_same_length(a, b)
    return a + b


def sub(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    _check_same_length(a, b)
    return a - b


def scale(a: torch.Tensor, s: float) -> torch.Tensor:
    return a * s


def dot(a: torch.Tensor, b: torch.Tensor) -> float:
    _check_same_length(a, b)
    return torch.dot(a, b).item()


def magnitude(a: torch.Tensor) -> float:
    return torch.linalg.vector_norm(a).item()


def unit(a: torch.Tensor) -> torch.Tensor:
    """
    Unit vector in the direction of a.

    Raises:
        DegenerateVectorError: if |a| is zero, subnormal or not finite
    """
    mag = magnitude(a)
    if not is_normal(mag):
        raise DegenerateVectorError(f"Cannot normalise vector of magnitude {mag}")
    return a / mag


def distance(a: torch.Tensor, b: torch.Tensor) -> float:
    return magnitude(sub(a, b))


def distance_squared(a: torch.Tensor, b: torch.Tensor) -> float:
    d = sub(a, b)
    return torch.dot(d, d).item()


def inverse(a: torch.Tensor) -> torch.Tensor:
    """
    Coordinatewise reciprocal (not the unit vector).

    Raises:
        DegenerateVectorError: if any coordinate is zero
    """
    if torch.any(a == 0):
        raise DegenerateVectorError("Cannot invert a vector with a zero coordinate")
    return 1.0 / a
