import pytest
import torch

from src.pointstats.errors import DimensionMismatchError, EmptyInputError
from src.pointstats.point_set import PointSet, as_point_set


def test_construct_from_lists():
    points = PointSet([[1, 2, 3], [4, 5, 6]])

    assert points.n == 2
    assert points.dim == 3
    assert len(points) == 2
    assert points.points.dtype == torch.float64
    assert torch.equal(points[1], torch.tensor([4.0, 5.0, 6.0], dtype=torch.float64))


@pytest.mark.parametrize("data", [
    torch.tensor([[1, 2], [3, 4]], dtype=torch.int64),
    torch.tensor([[1, 2], [3, 4]], dtype=torch.uint8),
    torch.tensor([[1, 2], [3, 4]], dtype=torch.float32),
])
def test_narrow_encodings_are_converted_to_float64(data):
    points = PointSet(data)

    assert points.points.dtype == torch.float64
    assert torch.equal(points.points, torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64))


@pytest.mark.parametrize("data,expected_error", [
    ([], EmptyInputError),
    (torch.empty(0, 3), EmptyInputError),
    ([[1.0, 2.0], [3.0]], DimensionMismatchError),
    (torch.tensor([1.0, 2.0]), ValueError),
    (torch.empty(3, 0), ValueError),
    ([[1.0, float("nan")]], ValueError),
    ([[float("inf"), 1.0]], ValueError),
])
def test_invalid_point_sets(data, expected_error):
    with pytest.raises(expected_error):
        PointSet(data)


def test_point_set_is_read_only():
    source = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
    points = PointSet(source)

    source[0, 0] = 100.0
    points.points[1, 1] = 100.0
    points[0][1] = 100.0

    assert torch.equal(points.points, torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64))


def test_iteration_yields_rows_in_order():
    rows = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    points = PointSet(rows)

    assert [p.tolist() for p in points] == rows


def test_from_bytes():
    points = PointSet.from_bytes([[0, 255], [17, 3]])

    assert points.points.dtype == torch.float64
    assert points.points.tolist() == [[0.0, 255.0], [17.0, 3.0]]


@pytest.mark.parametrize("data", [
    [[0, 256]],
    [[-1, 3]],
    torch.tensor([[1.5, 2.0]]),
])
def test_from_bytes_rejects_values_outside_byte_range(data):
    with pytest.raises(ValueError):
        PointSet.from_bytes(data)


def test_translate():
    points = PointSet([[1.0, 1.0], [3.0, 5.0]])

    moved = points.translate(torch.tensor([1.0, 1.0]))

    assert moved.points.tolist() == [[0.0, 0.0], [2.0, 4.0]]
    assert points.points.tolist() == [[1.0, 1.0], [3.0, 5.0]]


@pytest.mark.parametrize("query", [
    torch.tensor([1.0, 2.0, 3.0]),
    torch.tensor([[1.0, 2.0]]),
])
def test_check_point_dimension(query):
    points = PointSet([[0.0, 0.0]])

    with pytest.raises(DimensionMismatchError):
        points.check_point(query)


def test_as_point_set_passes_point_sets_through():
    points = PointSet([[1.0]])

    assert as_point_set(points) is points
    assert isinstance(as_point_set([[1.0], [2.0]]), PointSet)
