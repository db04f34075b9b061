import pytest
import torch

from src.pointstats.data_generators import generate_points
from src.pointstats.point_set import PointSet


@pytest.fixture
def orthoplex_points():
    """Vertices of the 4D cross polytope: 8 points whose geometric median is the origin."""
    eye = torch.eye(4, dtype=torch.float64)
    return PointSet(torch.cat([eye, -eye]))


@pytest.fixture
def random_points():
    """50 seeded uniform random points in 10 dimensions."""
    return generate_points(10, 50, seed=17)


@pytest.fixture
def line_points():
    """Five collinear points with one far from the rest."""
    return PointSet([[0.0], [1.0], [2.0], [3.0], [10.0]])
