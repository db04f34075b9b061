import math
import warnings
from typing import Optional, Union

import torch

from .centroids import arithmetic_centroid, first_point
from .config import MedianMethod, SolverConfig
from .eccentricity import eccentricity_vector, scalar_eccentricity
from .errors import DegenerateVectorError, NonConvergentError
from .point_set import PointSet, PointsLike, as_point_set
from .vector_ops import distance, dot, magnitude, normal_mask, unit

# Below this 1 - (u.v)^2 the two point linear system is treated as singular.
PARALLEL_TOLERANCE = 1e-12


def _better_point(data: torch.Tensor, estimate: torch.Tensor):
    """
    One Weiszfeld step before the final division: the reciprocal distance
    weights sum and the weighted sum of the points. Points coinciding with
    the estimate are excluded rather than discarding the whole step.
    """
    distances = torch.linalg.vector_norm(data - estimate, dim=1)
    mask = normal_mask(distances)
    reciprocals = torch.where(mask, 1.0 / torch.where(mask, distances, torch.ones_like(distances)),
                              torch.zeros_like(distances))
    return reciprocals.sum().item(), (data * reciprocals.unsqueeze(1)).sum(dim=0)


def weiszfeld_median(
    points: PointSet,
    eps: float,
    max_iterations: int,
    start: Optional[torch.Tensor] = None,
) -> torch.Tensor:
    """
    Weiszfeld's fixed point iteration, started from the arithmetic centroid.

    Terminates when a step moves less than eps; that last small step is kept.
    """
    data = points.points
    estimate = arithmetic_centroid(points) if start is None else start
    for _ in range(max_iterations):
        rsum, vsum = _better_point(data, estimate)
        if rsum == 0.0:
            # every member coincides with the estimate
            return estimate
        new_estimate = vsum / rsum
        if distance(new_estimate, estimate) < eps:
            return new_estimate
        estimate = new_estimate
    raise NonConvergentError(
        f"Weiszfeld iteration did not converge to eps={eps} in {max_iterations} iterations",
        iterations=max_iterations,
    )


def two_point_median(points: PointSet, eps: float, max_iterations: int) -> torch.Tensor:
    """
    Two point secant style iteration.

    Two estimates, seeded from `first_point` and the arithmetic centroid, are moved
    along their eccentricity directions u and v to the points of closest approach
    of the lines op1 + a*u and op2 + b*v. Stops when those points are closer than
    eps and the scalar eccentricity of their midpoint is below eps, and returns
    the midpoint.

    Nearly parallel directions (1 - (u.v)^2 below PARALLEL_TOLERANCE) or a
    vanishing eccentricity make the 2x2 system singular; the search then
    continues with Weiszfeld's iteration from the current midpoint and a
    UserWarning is issued. The same happens when the two lines meet away from
    the median, which is the usual case in two dimensions where any two
    non-parallel lines intersect.
    """
    op1 = first_point(points)
    op2 = arithmetic_centroid(points)
    for iteration in range(max_iterations):
        try:
            u = unit(eccentricity_vector(points, op1))
            v = unit(eccentricity_vector(points, op2))
        except DegenerateVectorError:
            return _fall_back(points, op1, op2, eps, max_iterations - iteration, "a vanishing eccentricity")
        uv = dot(u, v)
        denominator = 1.0 - uv ** 2
        if denominator < PARALLEL_TOLERANCE:
            return _fall_back(points, op1, op2, eps, max_iterations - iteration, "parallel search directions")

        pd = op2 - op1
        udotpd = dot(u, pd)
        b = (uv * udotpd - dot(v, pd)) / denominator
        a = udotpd + b * uv
        f1 = op1 + a * u
        f2 = op2 + b * v
        if distance(f1, f2) < eps:
            midpoint = (f1 + f2) * 0.5
            if scalar_eccentricity(points, midpoint) < eps:
                return midpoint
            return _fall_back(points, f1, f2, eps, max_iterations - iteration - 1, "lines meeting away from the median")
        op1, op2 = f1, f2
    raise NonConvergentError(
        f"Two point iteration did not converge to eps={eps} in {max_iterations} iterations",
        iterations=max_iterations,
    )


def _fall_back(points: PointSet, op1, op2, eps: float, remaining: int, reason: str) -> torch.Tensor:
    warnings.warn(
        f"Two point median met {reason}, continuing with Weiszfeld iteration",
        UserWarning,
        stacklevel=4,
    )
    return weiszfeld_median(points, eps, max(remaining, 1), start=(op1 + op2) * 0.5)


def secant_median(points: PointSet, eps: float, max_iterations: int) -> torch.Tensor:
    """
    Secant method on the magnitude of the eccentricity vector.

    Each new point is p2 + e2 * |p1 - p2| / ed, where ed is the drop in
    eccentricity magnitude when it decreased and the sum of the two magnitudes
    when it grew, damping the step after an overshoot. Stops as soon as the
    eccentricity magnitude falls below eps.
    """
    p1 = first_point(points)
    e1 = eccentricity_vector(points, p1)
    e1mag = magnitude(e1)
    if e1mag < eps:
        return p1
    p2 = p1 + e1 * (magnitude(p1) / e1mag / points.n)
    for _ in range(max_iterations):
        e2 = eccentricity_vector(points, p2)
        e2mag = magnitude(e2)
        if e2mag < eps:
            return p2
        ed = e1mag - e2mag if e1mag > e2mag else e1mag + e2mag
        step = distance(p1, p2) / ed
        if not math.isfinite(step):
            raise NonConvergentError(
                f"Secant iteration stalled with eccentricity {e2mag}", iterations=max_iterations
            )
        p1, p2, e1mag = p2, p2 + e2 * step, e2mag
    raise NonConvergentError(
        f"Secant iteration did not converge to eps={eps} in {max_iterations} iterations",
        iterations=max_iterations,
    )


_SOLVERS = {
    MedianMethod.WEISZFELD: weiszfeld_median,
    MedianMethod.TWO_POINT: two_point_median,
    MedianMethod.SECANT: secant_median,
}


def geometric_median(
    points: Union[PointSet, PointsLike],
    eps: float = 1e-6,
    method: Union[MedianMethod, str] = MedianMethod.WEISZFELD,
    max_iterations: int = 1000,
    config: Optional[SolverConfig] = None,
) -> torch.Tensor:
    """
    Compute the geometric median of a set of points.
    The geometric median is the point that minimises the sum of distances to the points.

    Args:
        points: PointSet or (n, d) collection of points
        eps: Convergence tolerance, > 0. Default 1e-6.
        method: Which iterative scheme to use, see MedianMethod. Default Weiszfeld.
        max_iterations: Iteration cap. Default 1000.
        config: SolverConfig; when given it replaces eps, method and max_iterations.
    Returns:
        Geometric median tensor of shape (d,)
    Raises:
        NonConvergentError: if the scheme does not meet eps within max_iterations
    """
    if config is None:
        config = SolverConfig(eps=eps, method=method, max_iterations=max_iterations)
    points = as_point_set(points)

    with torch.no_grad():
        return _SOLVERS[config.method](points, config.eps, config.max_iterations)
