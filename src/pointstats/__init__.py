from .errors import (
    PointStatsError,
    EmptyInputError,
    DimensionMismatchError,
    DegenerateVectorError,
    NonConvergentError,
)
from .point_set import PointSet
from .config import MedianMethod, SolverConfig
from .centroids import arithmetic_centroid, harmonic_centroid, first_point
from .geometric_median import geometric_median
from .eccentricity import (
    eccentricity_vectors,
    eccentricity_in_set,
    eccentricity_vector,
    scalar_eccentricity,
    scalar_eccentricities,
    distance_sums,
    distance_sum,
    medoid,
    emedoid,
    moe,
    sorted_eccentricities,
)
from .comparison import trend
from .stats import MStats, Med

__all__ = [
    # Errors
    "PointStatsError",
    "EmptyInputError",
    "DimensionMismatchError",
    "DegenerateVectorError",
    "NonConvergentError",
    # Data
    "PointSet",
    "MStats",
    "Med",
    # Centrality
    "MedianMethod",
    "SolverConfig",
    "arithmetic_centroid",
    "harmonic_centroid",
    "first_point",
    "geometric_median",
    # Dispersion
    "eccentricity_vectors",
    "eccentricity_in_set",
    "eccentricity_vector",
    "scalar_eccentricity",
    "scalar_eccentricities",
    "distance_sums",
    "distance_sum",
    "medoid",
    "emedoid",
    "moe",
    "sorted_eccentricities",
    # Comparison
    "trend",
]
