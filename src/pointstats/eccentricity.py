"""
Eccentricity and distance based dispersion measures of a point set.

The eccentricity vector of a point is the sum of the unit vectors pointing
from it towards every other point of the set. It vanishes at the geometric
median and otherwise points towards it, so its magnitude is a positive
measure of "not being the median" that needs no prior knowledge of the median.

Two scalar normalisations are in use and are kept distinct:
    member points (`eccentricity_in_set`, `scalar_eccentricities`): |e| / (n - 1)
    any other query point (`scalar_eccentricity`):                  |e| / d
"""
from typing import NamedTuple, Tuple, Union

import torch

from .config import MedianMethod
from .point_set import PointSet, PointsLike, as_point_set
from .stats import Med, MinMax, MStats, ameanstd, median, minmax
from .vector_ops import normal_mask

MedoidResult = MinMax


class SortedEccentricities(NamedTuple):
    median: torch.Tensor
    eccentricities: torch.Tensor


def _unit_rows(differences: torch.Tensor) -> torch.Tensor:
    """Unit vectors along the last dim; coincident (non-normal) rows become zero."""
    mags = torch.linalg.vector_norm(differences, dim=-1, keepdim=True)
    mask = normal_mask(mags)
    safe_mags = torch.where(mask, mags, torch.ones_like(mags))
    return torch.where(mask, differences / safe_mags, torch.zeros_like(differences))


def magnitudes(vectors: torch.Tensor) -> torch.Tensor:
    """Magnitudes of each row of an (n, d) tensor. Returns shape: (n,)"""
    return torch.linalg.vector_norm(vectors, dim=-1)


def eccentricity_vectors(points: Union[PointSet, PointsLike]) -> torch.Tensor:
    """
    Eccentricity vector of every member point.

    Each pair's unit vector is computed once; it is added to one point's
    accumulator and subtracted from the other's. Row i only looks at the
    rows before it, so memory stays O(n * d).
    Returns shape: (n, d)
    """
    points = as_point_set(points)
    data = points.points
    field = torch.zeros_like(data)
    for i in range(1, points.n):
        # units[j] points from p_i towards p_j, j < i
        units = _unit_rows(data[:i] - data[i])
        field[i] += units.sum(dim=0)
        field[:i] -= units
    return field


def eccentricity_in_set_vector(points: Union[PointSet, PointsLike], index: int) -> torch.Tensor:
    """Eccentricity vector of the member at `index`, excluding itself."""
    points = as_point_set(points)
    index = range(points.n)[index]
    data = points.points
    others = torch.cat([data[:index], data[index + 1:]])
    return _unit_rows(others - data[index]).sum(dim=0)


def eccentricity_in_set(points: Union[PointSet, PointsLike], index: int) -> float:
    """
    Scalar eccentricity of a single member point: |e| / (n - 1).
    When all members are needed use `scalar_eccentricities`.
    """
    points = as_point_set(points)
    if points.n == 1:
        return 0.0
    return torch.linalg.vector_norm(eccentricity_in_set_vector(points, index)).item() / (points.n - 1)


def eccentricity_vector(points: Union[PointSet, PointsLike], query: torch.Tensor) -> torch.Tensor:
    """
    Eccentricity vector of any point, typically not a member.
    Members coinciding with the query point are skipped.
    Returns shape: (d,)
    """
    points = as_point_set(points)
    query = points.check_point(query)
    return _unit_rows(points.points - query).sum(dim=0)


def scalar_eccentricity(points: Union[PointSet, PointsLike], query: torch.Tensor) -> float:
    """Residual median error of any point: |e| / d."""
    points = as_point_set(points)
    return torch.linalg.vector_norm(eccentricity_vector(points, query)).item() / points.dim


def scalar_eccentricities(points: Union[PointSet, PointsLike]) -> torch.Tensor:
    """
    Scalar eccentricities of all members, |e_i| / (n - 1).
    Returns shape: (n,)
    """
    points = as_point_set(points)
    mags = magnitudes(eccentricity_vectors(points))
    if points.n == 1:
        return mags
    return mags / (points.n - 1)


def distance_sums(points: Union[PointSet, PointsLike]) -> torch.Tensor:
    """
    For each member, the sum of its distances to all the other members.
    Each pairwise distance is computed once and credited to both ends.
    Returns shape: (n,)
    """
    points = as_point_set(points)
    data = points.points
    sums = torch.zeros(points.n, dtype=torch.float64)
    for i in range(1, points.n):
        distances = torch.linalg.vector_norm(data[:i] - data[i], dim=-1)
        sums[i] += distances.sum()
        sums[:i] += distances
    return sums


def distance_sum_in_set(points: Union[PointSet, PointsLike], index: int) -> float:
    """Sum of distances from the member at `index` to all the others."""
    points = as_point_set(points)
    data = points.points
    return torch.linalg.vector_norm(data - data[index], dim=-1).sum().item()


def distances_to(points: Union[PointSet, PointsLike], query: torch.Tensor) -> torch.Tensor:
    """Distances from any point to every member. Returns shape: (n,)"""
    points = as_point_set(points)
    query = points.check_point(query)
    return torch.linalg.vector_norm(points.points - query, dim=-1)


def distance_sum(points: Union[PointSet, PointsLike], query: torch.Tensor) -> float:
    """
    Sum of distances from any point to every member.
    The geometric median is the point minimising this function.
    """
    return distances_to(points, query).sum().item()


def medoid(points: Union[PointSet, PointsLike]) -> MedoidResult:
    """
    Medoid and outlier by total distance.
    Returns (medoid_distance_sum, medoid_index, outlier_distance_sum, outlier_index).
    """
    return minmax(distance_sums(points))


def emedoid(points: Union[PointSet, PointsLike]) -> MedoidResult:
    """
    Medoid and outlier by scalar eccentricity.

    This can differ from `medoid`: points bunched at distance r from some c
    and the same points spread around a circle of radius r have the same
    distance sum from c, but c's eccentricity is much lower in the second case.
    """
    return minmax(scalar_eccentricities(points))


def moe(points: Union[PointSet, PointsLike]) -> Tuple[MStats, Med]:
    """
    Median of eccentricities: mean/std and median/quartiles of the scalar
    eccentricities of all members. A robust 1-D summary of multivariate spread.
    """
    eccs = scalar_eccentricities(points)
    return ameanstd(eccs), median(eccs)


def sorted_eccentricities(
    points: Union[PointSet, PointsLike],
    ascending: bool = True,
    eps: float = 1e-6,
    method: Union[MedianMethod, str] = MedianMethod.WEISZFELD,
    max_iterations: int = 1000,
) -> SortedEccentricities:
    """
    The geometric median together with the members' scalar eccentricities,
    sorted stably (equal values keep their input order).
    """
    # geometric_median imports this module
    from .geometric_median import geometric_median

    points = as_point_set(points)
    gm = geometric_median(points, eps=eps, method=method, max_iterations=max_iterations)
    eccs, _ = torch.sort(scalar_eccentricities(points), descending=not ascending, stable=True)
    return SortedEccentricities(gm, eccs)
