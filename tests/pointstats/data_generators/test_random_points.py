import math

import pytest
import torch

from src.pointstats.data_generators import generate_byte_points, generate_circle_points, generate_points
from src.pointstats.point_set import PointSet


def test_generate_points_shape_and_range():
    points = generate_points(3, 20, seed=0)

    assert isinstance(points, PointSet)
    assert (points.n, points.dim) == (20, 3)
    assert points.points.dtype == torch.float64
    assert points.points.min() >= 0.0
    assert points.points.max() < 1.0


def test_seed_is_reproducible():
    assert torch.equal(generate_points(4, 10, seed=5).points, generate_points(4, 10, seed=5).points)
    assert not torch.equal(generate_points(4, 10, seed=5).points, generate_points(4, 10, seed=6).points)


def test_seeding_leaves_global_rng_alone():
    torch.manual_seed(123)
    expected = torch.rand(3)

    torch.manual_seed(123)
    generate_points(2, 5, seed=1)
    assert torch.equal(torch.rand(3), expected)


def test_generate_byte_points():
    points = generate_byte_points(5, 30, seed=2)
    data = points.points

    assert (points.n, points.dim) == (30, 5)
    assert torch.equal(data, data.round())
    assert data.min() >= 0.0
    assert data.max() <= 255.0


def test_generate_circle_points():
    centre = torch.tensor([1.0, -1.0], dtype=torch.float64)
    points = generate_circle_points(8, radius=2.0, centre=centre, phase=0.3)

    radii = torch.linalg.vector_norm(points.points - centre, dim=1)
    assert torch.allclose(radii, torch.full((8,), 2.0, dtype=torch.float64))
    assert torch.allclose(points.points.mean(dim=0), centre, atol=1e-12)

    first = points[0] - centre
    assert math.atan2(first[1].item(), first[0].item()) == pytest.approx(0.3)


@pytest.mark.parametrize("d,n", [(0, 5), (2, 0), (-1, 5), (2.5, 5)])
def test_invalid_shapes(d, n):
    with pytest.raises(ValueError):
        generate_points(d, n, seed=0)
