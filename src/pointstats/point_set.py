from typing import Iterator, Sequence, Union

import torch

from .errors import DimensionMismatchError, EmptyInputError

PointsLike = Union[torch.Tensor, Sequence[Sequence[float]]]


class PointSet:
    """
    Read-only ordered collection of n points in d-dimensional real space.

    The points are held as a private (n, d) float64 tensor. Narrower numeric
    encodings (uint8 bytes, integers, float32) are converted to float64 once,
    here at the boundary, so every algorithm works on a single representation.

    Args:
        points: (n, d) tensor or nested sequence of numbers, n >= 1, d >= 1
    """
    def __init__(self, points: PointsLike):
        if isinstance(points, PointSet):
            data = points._points.clone()
        elif isinstance(points, torch.Tensor):
            data = points.detach().to(dtype=torch.float64, device="cpu").clone()
        else:
            rows = [list(p) for p in points]
            if len(rows) == 0:
                raise EmptyInputError("PointSet requires at least one point")
            lengths = {len(r) for r in rows}
            if len(lengths) != 1:
                raise DimensionMismatchError(f"All points must have the same dimension, got {sorted(lengths)}")
            data = torch.tensor(rows, dtype=torch.float64)

        if data.ndim != 2:
            raise ValueError(f"points must be a 2D (n, d) collection, got {data.ndim}D")
        if data.shape[0] == 0:
            raise EmptyInputError("PointSet requires at least one point")
        if data.shape[1] == 0:
            raise ValueError("Points must have at least one coordinate")
        if not torch.isfinite(data).all():
            raise ValueError("Point coordinates must be finite")

        self._points = data

    @classmethod
    def from_bytes(cls, points: PointsLike) -> 'PointSet':
        """Build a PointSet from byte-valued (0..255) coordinates."""
        data = points if isinstance(points, torch.Tensor) else torch.tensor(points, dtype=torch.int64)
        if data.dtype != torch.uint8:
            if data.is_floating_point() and not torch.equal(data, data.round()):
                raise ValueError("Byte coordinates must be whole numbers")
            if torch.any(data < 0) or torch.any(data > 255):
                raise ValueError("Byte coordinates must lie in 0..255")
            data = data.to(torch.uint8)
        return cls(data.to(torch.float64))

    @property
    def points(self) -> torch.Tensor:
        """(n, d) copy of the points."""
        return self._points.clone()

    @property
    def n(self) -> int:
        return self._points.shape[0]

    @property
    def dim(self) -> int:
        return self._points.shape[1]

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, index: int) -> torch.Tensor:
        return self._points[index].clone()

    def __iter__(self) -> Iterator[torch.Tensor]:
        for i in range(self.n):
            yield self[i]

    def __repr__(self) -> str:
        return f"PointSet(n={self.n}, dim={self.dim})"

    def check_point(self, point: torch.Tensor) -> torch.Tensor:
        """Return point as a float64 vector, checking it lives in this set's space."""
        point = torch.as_tensor(point, dtype=torch.float64)
        if point.ndim != 1 or point.shape[0] != self.dim:
            raise DimensionMismatchError(
                f"Point of shape {tuple(point.shape)} does not match set dimension {self.dim}"
            )
        return point

    def translate(self, offset: torch.Tensor) -> 'PointSet':
        """
        New PointSet with every point moved by -offset.
        With offset set to the geometric median this gives the zero median form.
        """
        offset = self.check_point(offset)
        return PointSet(self._points - offset)


def as_point_set(points: Union[PointSet, PointsLike]) -> PointSet:
    if isinstance(points, PointSet):
        return points
    return PointSet(points)
