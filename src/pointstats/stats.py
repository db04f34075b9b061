"""
One-dimensional descriptive statistics.

These are the scalar primitives consumed by the multidimensional engines,
e.g. `moe` summarises a sample of scalar eccentricities with `ameanstd`
and `median`.

Weighted variants use linearly descending weights n, n-1, ..., 1, so time
dependent data should be given in stack order (the last item being the oldest).
"""
import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Union

import torch

from .errors import DimensionMismatchError, EmptyInputError

Sample = Union[torch.Tensor, Sequence[float]]


@dataclass(frozen=True)
class MStats:
    """Mean and standard deviation (a std ratio for the geometric variants)."""
    mean: float
    std: float

    def __str__(self) -> str:
        return f"Mean: {self.mean}, Std: {self.std}"


@dataclass(frozen=True)
class Med:
    """Median and quartiles."""
    lower_quartile: float
    median: float
    upper_quartile: float

    def __str__(self) -> str:
        return f"(LQ: {self.lower_quartile}, M: {self.median}, UQ: {self.upper_quartile})"


class MinMax(NamedTuple):
    min_value: float
    min_index: int
    max_value: float
    max_index: int


def _as_sample(data: Sample, name: str) -> torch.Tensor:
    sample = torch.as_tensor(data, dtype=torch.float64).flatten()
    if sample.numel() == 0:
        raise EmptyInputError(f"{name} - sample is empty")
    return sample


def _descending_weights(n: int) -> torch.Tensor:
    return torch.arange(n, 0, -1, dtype=torch.float64)


def _weights_sum(n: int) -> float:
    return n * (n + 1) / 2


def _reject_zeros(sample: torch.Tensor, name: str):
    if torch.any(sample == 0):
        raise ValueError(f"{name} does not accept zero valued data")


def _log_sample(sample: torch.Tensor, name: str) -> torch.Tensor:
    if torch.any(sample <= 0):
        raise ValueError(f"{name} requires strictly positive data")
    return torch.log(sample)


def _std(mean_of_squares: float, mean: float) -> float:
    # rounding can push a zero variance slightly negative
    return math.sqrt(max(mean_of_squares - mean ** 2, 0.0))


def amean(data: Sample) -> float:
    """Arithmetic mean."""
    sample = _as_sample(data, "amean")
    return sample.mean().item()


def ameanstd(data: Sample) -> MStats:
    """Arithmetic mean and (population) standard deviation."""
    sample = _as_sample(data, "ameanstd")
    mean = sample.mean().item()
    return MStats(mean=mean, std=_std((sample ** 2).mean().item(), mean))


def awmean(data: Sample) -> float:
    """Linearly weighted arithmetic mean."""
    sample = _as_sample(data, "awmean")
    n = sample.numel()
    return (torch.dot(_descending_weights(n), sample) / _weights_sum(n)).item()


def awmeanstd(data: Sample) -> MStats:
    """Linearly weighted arithmetic mean and standard deviation."""
    sample = _as_sample(data, "awmeanstd")
    n = sample.numel()
    weights = _descending_weights(n)
    mean = (torch.dot(weights, sample) / _weights_sum(n)).item()
    mean_of_squares = (torch.dot(weights, sample ** 2) / _weights_sum(n)).item()
    return MStats(mean=mean, std=_std(mean_of_squares, mean))


def hmean(data: Sample) -> float:
    """Harmonic mean. Zero valued data is not allowed."""
    sample = _as_sample(data, "hmean")
    _reject_zeros(sample, "hmean")
    return (sample.numel() / (1.0 / sample).sum()).item()


def hwmean(data: Sample) -> float:
    """Linearly weighted harmonic mean. Zero valued data is not allowed."""
    sample = _as_sample(data, "hwmean")
    _reject_zeros(sample, "hwmean")
    n = sample.numel()
    return (_weights_sum(n) / (_descending_weights(n) / sample).sum()).item()


def gmean(data: Sample) -> float:
    """
    Geometric mean: the exponential of the arithmetic mean of the natural logs.
    Less sensitive than the arithmetic mean to outliers near the maximum.
    """
    logs = _log_sample(_as_sample(data, "gmean"), "gmean")
    return math.exp(logs.mean().item())


def gmeanstd(data: Sample) -> MStats:
    """Geometric mean and std ratio (the std of the logs, converted back)."""
    logs = _log_sample(_as_sample(data, "gmeanstd"), "gmeanstd")
    mean = logs.mean().item()
    return MStats(mean=math.exp(mean), std=math.exp(_std((logs ** 2).mean().item(), mean)))


def gwmean(data: Sample) -> float:
    """Linearly weighted geometric mean."""
    logs = _log_sample(_as_sample(data, "gwmean"), "gwmean")
    n = logs.numel()
    return math.exp((torch.dot(_descending_weights(n), logs) / _weights_sum(n)).item())


def gwmeanstd(data: Sample) -> MStats:
    """Linearly weighted geometric mean and std ratio."""
    logs = _log_sample(_as_sample(data, "gwmeanstd"), "gwmeanstd")
    n = logs.numel()
    weights = _descending_weights(n)
    mean = (torch.dot(weights, logs) / _weights_sum(n)).item()
    mean_of_squares = (torch.dot(weights, logs ** 2) / _weights_sum(n)).item()
    return MStats(mean=math.exp(mean), std=math.exp(_std(mean_of_squares, mean)))


def median(data: Sample) -> Med:
    """
    Median and quartiles of a sample.

    The median of an even sized sample is the mean of the two middle values.
    Quartiles are the order statistics at n//4 and 3n//4.
    """
    values, _ = torch.sort(_as_sample(data, "median"))
    n = values.numel()
    mid = n // 2
    if n % 2 == 1:
        med = values[mid].item()
    else:
        med = (values[mid] + values[mid - 1]).item() / 2
    return Med(
        lower_quartile=values[n // 4].item(),
        median=med,
        upper_quartile=values[(3 * n) // 4].item(),
    )


def _pearson(x: torch.Tensor, y: torch.Tensor) -> float:
    n = x.numel()
    sx, sy = x.sum().item(), y.sum().item()
    sxy = torch.dot(x, y).item()
    sx2 = torch.dot(x, x).item()
    sy2 = torch.dot(y, y).item()
    return (sxy - sx / n * sy) / math.sqrt((sx2 - sx / n * sx) * (sy2 - sy / n * sy))


def correlation(data1: Sample, data2: Sample) -> float:
    """Pearson's correlation coefficient of two samples of the same size."""
    x = _as_sample(data1, "correlation")
    y = _as_sample(data2, "correlation")
    if x.numel() != y.numel():
        raise DimensionMismatchError(
            f"correlation - samples are not of the same size: {x.numel()} and {y.numel()}"
        )
    return _pearson(x, y)


def autocorr(data: Sample) -> float:
    """Correlation coefficient of pairs of successive values of a time series."""
    sample = _as_sample(data, "autocorr")
    if sample.numel() < 2:
        raise ValueError("autocorr - sample is too small, need at least 2 values")
    return _pearson(sample[:-1], sample[1:])


def minmax(data: Sample) -> MinMax:
    """Minimum and maximum values with their indices (first occurrence wins)."""
    sample = _as_sample(data, "minmax").tolist()
    min_index = max_index = 0
    for i, x in enumerate(sample):
        if x < sample[min_index]:
            min_index = i
        if x > sample[max_index]:
            max_index = i
    return MinMax(sample[min_index], min_index, sample[max_index], max_index)
