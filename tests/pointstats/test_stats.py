import math

import pytest
import torch

from src.pointstats.errors import DimensionMismatchError, EmptyInputError
from src.pointstats.stats import (
    Med,
    MStats,
    amean,
    ameanstd,
    autocorr,
    awmean,
    awmeanstd,
    correlation,
    gmean,
    gmeanstd,
    gwmean,
    gwmeanstd,
    hmean,
    hwmean,
    median,
    minmax,
)


@pytest.fixture
def one_to_fourteen():
    return [float(i) for i in range(1, 15)]


# =============================================================================
# Means
# =============================================================================

def test_arithmetic(one_to_fourteen):
    assert amean(one_to_fourteen) == pytest.approx(7.5)

    stats = ameanstd(one_to_fourteen)
    assert stats.mean == pytest.approx(7.5)
    assert stats.std == pytest.approx(4.031128874149275)


def test_weighted_arithmetic_favours_first_items(one_to_fourteen):
    assert awmean(one_to_fourteen) == pytest.approx(16 / 3)
    assert awmeanstd(one_to_fourteen).mean == pytest.approx(16 / 3)
    assert awmean([2.0, 2.0, 2.0]) == pytest.approx(2.0)


def test_weighted_arithmetic_std():
    # weights 2, 1: mean 1/3, mean of squares 1/3
    stats = awmeanstd([0.0, 1.0])

    assert stats.mean == pytest.approx(1 / 3)
    assert stats.std == pytest.approx(math.sqrt(2) / 3)


def test_constant_sample_has_zero_std():
    assert ameanstd([0.1] * 7).std == pytest.approx(0.0, abs=1e-7)
    assert gmeanstd([3.0] * 5).std == pytest.approx(1.0)


def test_harmonic():
    assert hmean([1.0, 2.0, 4.0]) == pytest.approx(3 / 1.75)
    assert hwmean([1.0, 2.0]) == pytest.approx(1.2)


@pytest.mark.parametrize("fn", [hmean, hwmean])
def test_harmonic_rejects_zeros(fn):
    with pytest.raises(ValueError):
        fn([1.0, 0.0, 2.0])


def test_geometric():
    assert gmean([1.0, 2.0, 4.0]) == pytest.approx(2.0)
    assert gwmean([1.0, 4.0]) == pytest.approx(4 ** (1 / 3))

    stats = gmeanstd([1.0, 2.0, 4.0])
    assert stats.mean == pytest.approx(2.0)
    assert stats.std == pytest.approx(2 ** math.sqrt(2 / 3))

    assert gwmeanstd([1.0, 4.0]).mean == pytest.approx(4 ** (1 / 3))


@pytest.mark.parametrize("fn", [gmean, gmeanstd, gwmean, gwmeanstd])
@pytest.mark.parametrize("data", [[1.0, 0.0], [1.0, -2.0]])
def test_geometric_rejects_non_positive(fn, data):
    with pytest.raises(ValueError):
        fn(data)


def test_mean_ordering():
    data = [1.0, 3.0, 7.0, 20.0]

    assert hmean(data) <= gmean(data) <= amean(data)


# =============================================================================
# Median, correlation and extremes
# =============================================================================

def test_median_even(one_to_fourteen):
    assert median(one_to_fourteen) == Med(lower_quartile=4.0, median=7.5, upper_quartile=11.0)


def test_median_odd_and_unsorted():
    med = median(torch.tensor([9.0, 1.0, 5.0, 3.0, 7.0]))

    assert med == Med(lower_quartile=3.0, median=5.0, upper_quartile=7.0)


def test_median_single_value():
    assert median([4.2]) == Med(4.2, 4.2, 4.2)


def test_median_does_not_sort_input():
    data = torch.tensor([3.0, 1.0, 2.0])

    median(data)

    assert data.tolist() == [3.0, 1.0, 2.0]


def test_correlation():
    x = [1.0, 2.0, 3.0, 4.0]

    assert correlation(x, [2.0, 4.0, 6.0, 8.0]) == pytest.approx(1.0)
    assert correlation(x, [8.0, 6.0, 4.0, 2.0]) == pytest.approx(-1.0)


def test_correlation_length_mismatch():
    with pytest.raises(DimensionMismatchError):
        correlation([1.0, 2.0, 3.0], [1.0, 2.0])


def test_autocorr():
    assert autocorr([1.0, 2.0, 3.0, 4.0, 5.0]) == pytest.approx(1.0)
    assert autocorr([1.0, -1.0, 1.0, -1.0, 1.0, -1.0]) == pytest.approx(-1.0)


def test_autocorr_needs_two_values():
    with pytest.raises(ValueError):
        autocorr([1.0])


def test_minmax_first_occurrence():
    result = minmax([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0, 9.0])

    assert result == (1.0, 1, 9.0, 5)
    assert result.min_value == 1.0
    assert result.max_index == 5


@pytest.mark.parametrize("fn", [
    amean, ameanstd, awmean, awmeanstd, hmean, hwmean,
    gmean, gmeanstd, gwmean, gwmeanstd, median, autocorr, minmax,
])
def test_empty_sample(fn):
    with pytest.raises(EmptyInputError):
        fn([])


def test_str_formatting():
    assert str(MStats(mean=1.5, std=0.5)) == "Mean: 1.5, Std: 0.5"
    assert str(Med(1.0, 2.0, 3.0)) == "(LQ: 1.0, M: 2.0, UQ: 3.0)"
