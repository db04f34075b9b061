from typing import Union

import torch

from .config import MedianMethod
from .errors import DimensionMismatchError
from .geometric_median import geometric_median
from .point_set import PointSet, PointsLike, as_point_set


def trend(
    points1: Union[PointSet, PointsLike],
    points2: Union[PointSet, PointsLike],
    eps: float = 1e-6,
    method: Union[MedianMethod, str] = MedianMethod.WEISZFELD,
    max_iterations: int = 1000,
) -> torch.Tensor:
    """
    Vector from the geometric median of points1 to that of points2.

    A robust relationship between two unordered sets of points. The sets must
    live in the same space but may hold different numbers of points.
    Returns shape: (d,)
    """
    points1 = as_point_set(points1)
    points2 = as_point_set(points2)
    if points1.dim != points2.dim:
        raise DimensionMismatchError(
            f"Point sets must share a dimension, got {points1.dim} and {points2.dim}"
        )
    median1 = geometric_median(points1, eps=eps, method=method, max_iterations=max_iterations)
    median2 = geometric_median(points2, eps=eps, method=method, max_iterations=max_iterations)
    return median2 - median1
