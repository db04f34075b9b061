class PointStatsError(Exception):
    """Base class for all errors raised by pointstats."""


class EmptyInputError(PointStatsError, ValueError):
    """A point set or scalar sample has no elements."""


class DimensionMismatchError(PointStatsError, ValueError):
    """Two vectors or point sets that must share a dimension do not."""


class DegenerateVectorError(PointStatsError, ValueError):
    """A zero-magnitude or non-finite vector where no skip rule applies."""


class NonConvergentError(PointStatsError, RuntimeError):
    """An iterative solver ran out of iterations before meeting its tolerance."""

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations
