import math
from typing import Optional

import torch

from ..point_set import PointSet


def _generator(seed: Optional[int]) -> torch.Generator:
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator


def _check_shape(d: int, n: int):
    if int(d) != d or d < 1:
        raise ValueError(f"d must be a positive integer, got {d}")
    if int(n) != n or n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")


def generate_points(d: int, n: int, seed: Optional[int] = None) -> PointSet:
    """
    n points in d dimensions with coordinates drawn uniformly from [0, 1).
    The same seed always gives the same points.
    """
    _check_shape(d, n)
    return PointSet(torch.rand(n, d, generator=_generator(seed), dtype=torch.float64))


def generate_byte_points(d: int, n: int, seed: Optional[int] = None) -> PointSet:
    """
    n points in d dimensions with byte (0..255) coordinates,
    converted to real coordinates by PointSet.from_bytes.
    """
    _check_shape(d, n)
    data = torch.randint(0, 256, (n, d), generator=_generator(seed), dtype=torch.uint8)
    return PointSet.from_bytes(data)


def generate_circle_points(
    n: int,
    radius: float = 1.0,
    centre: Optional[torch.Tensor] = None,
    phase: float = 0.0,
) -> PointSet:
    """
    n points spaced evenly around a circle in the plane.
    Returns a PointSet of dimension 2.
    """
    _check_shape(2, n)
    angles = phase + 2 * math.pi * torch.arange(n, dtype=torch.float64) / n
    circle = radius * torch.stack([torch.cos(angles), torch.sin(angles)], dim=1)
    if centre is not None:
        circle = circle + torch.as_tensor(centre, dtype=torch.float64)
    return PointSet(circle)
