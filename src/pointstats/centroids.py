import torch

from .point_set import PointSet, as_point_set
from .vector_ops import inverse, is_normal


def arithmetic_centroid(points: PointSet) -> torch.Tensor:
    """
    Simple multidimensional arithmetic mean.
    Returns shape: (d,)
    """
    points = as_point_set(points)
    return points.points.mean(dim=0)


def harmonic_centroid(points: PointSet) -> torch.Tensor:
    """
    Multidimensional harmonic mean: the coordinatewise inverse of the sum
    of the coordinatewise inverses of the points.

    Raises:
        DegenerateVectorError: if any coordinate of any point is zero,
            or the summed inverses are zero in some coordinate
    """
    points = as_point_set(points)
    centre = torch.zeros(points.dim, dtype=torch.float64)
    for p in points.points:
        centre += inverse(p)
    return inverse(centre)


def first_point(points: PointSet) -> torch.Tensor:
    """
    Seed for the geometric median iterations.

    Sum of unit vectors of the points divided by the sum of their inverse
    magnitudes. Points at the origin (or of non-normal magnitude) are skipped.
    Returns the origin when every point is skipped.
    """
    points = as_point_set(points)
    rsum = 0.0
    vsum = torch.zeros(points.dim, dtype=torch.float64)
    for p in points.points:
        mag = torch.linalg.vector_norm(p).item()
        if is_normal(mag):
            invmod = 1.0 / mag
            rsum += invmod
            vsum += p * invmod
    if rsum == 0.0:
        return vsum
    return vsum / rsum
