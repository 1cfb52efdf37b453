"""Descriptive statistics over small ordered numeric series."""

import logging
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def mean(values: Sequence[float]) -> float:
    """Return the simple arithmetic average of the values."""
    return float(np.mean(np.asarray(values, dtype=float)))


def sum_of_squares(
    values: Sequence[float],
    reference: float | Sequence[float] | None = None,
) -> float:
    """
    Compute the sum of squared differences.

    Args:
        values: Series of values.
        reference: What each value is compared against.
            - None: the mean of `values`.
            - scalar: the same value for every element.
            - sequence: element-wise; positions missing from the shorter
              sequence are skipped.

    Returns:
        SUM{(values[i] - reference[i])^2}.
    """
    x = np.asarray(values, dtype=float)

    if reference is None:
        ref = np.full(len(x), np.mean(x))
    elif np.isscalar(reference):
        ref = np.full(len(x), float(reference))
    else:
        ref = np.asarray(reference, dtype=float)
        n = min(len(x), len(ref))
        x, ref = x[:n], ref[:n]

    return float(np.sum((x - ref) ** 2))


def variance(values: Sequence[float]) -> float:
    """Sample variance (n - 1 denominator). A single value gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(sum_of_squares(values)) / (len(values) - 1))


def stddev(values: Sequence[float], is_sample: bool = False) -> float:
    """
    Compute standard deviation.

    Args:
        values: Series of values; at least two are required.
        is_sample: If True, uses the sample (n - 1) denominator,
            otherwise the population one.

    Returns:
        Standard deviation of the values.

    Raises:
        ValueError: If fewer than two values are given.
    """
    if len(values) < 2:
        raise ValueError(
            f"Standard deviation needs at least 2 values, got {len(values)}"
        )
    return float(np.std(np.asarray(values, dtype=float), ddof=1 if is_sample else 0))


def covariance(x_values: Sequence[float], y_values: Sequence[float]) -> float:
    """
    Sample covariance of x and y.

    Series of unequal length are truncated to the shorter length.

    Args:
        x_values: Dependent variable values.
        y_values: Independent variable values.

    Returns:
        Covariance of x and y.
    """
    x = np.asarray(x_values, dtype=float)
    y = np.asarray(y_values, dtype=float)

    if len(x) != len(y):
        n = min(len(x), len(y))
        logger.warning(
            "covariance: series lengths differ (%d vs %d), truncating to %d",
            len(x),
            len(y),
            n,
        )
        x, y = x[:n], y[:n]

    diffs = (x - np.mean(x)) * (y - np.mean(y))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum(diffs) / (len(x) - 1))


def percent(amount: float, total: float) -> float:
    """Return `amount` as a fraction of `total` (e.g. operating margin)."""
    return amount / total


def percent_change(current: float, previous: float) -> float:
    """Return the fractional change from `previous` to `current`."""
    return (current - previous) / previous


def percent_change_series(values: Sequence[float]) -> np.ndarray:
    """
    Convert a series of raw values to period-over-period percent changes.

    The first value has no predecessor, so the result is one element
    shorter than the input and is re-indexed from 0.

    Example:
        >>> percent_change_series([100.0, 110.0, 99.0])
        array([ 0.1, -0.1])
    """
    arr = np.asarray(values, dtype=float)
    if len(arr) < 2:
        return np.zeros(0)
    return np.diff(arr) / arr[:-1]


def weighted_average(values: Sequence[float], weights: Sequence[float]) -> float:
    """
    Weighted average of values.

    Raises:
        ValueError: If values and weights differ in length or the weights
            sum to zero.
    """
    if len(values) != len(weights):
        raise ValueError(
            f"Must pass the same number of weights and values "
            f"({len(weights)} weights, {len(values)} values)"
        )

    w = np.asarray(weights, dtype=float)
    total_weight = float(np.sum(w))
    if total_weight == 0:
        raise ValueError("Weights must not sum to zero")

    return float(np.sum(np.asarray(values, dtype=float) * w) / total_weight)
