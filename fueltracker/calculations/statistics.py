"""
Statistical Calculations

Handles the statistics behind consumption analytics:
- Means and population standard deviations
- Z-scores and outlier tests
- Min/mean/max summaries
"""

import math
from typing import List, Optional

from .constants import OUTLIER_STD_THRESHOLD


def calculate_mean(values: List[float]) -> Optional[float]:
    """
    Arithmetic mean.

    Examples:
        >>> calculate_mean([8.0, 10.0])
        9.0
        >>> calculate_mean([]) is None
        True
    """
    if not values:
        return None

    return sum(values) / len(values)


def calculate_population_std_dev(values: List[float]) -> Optional[float]:
    """
    Population standard deviation (divides by N, not N - 1).

    Examples:
        >>> calculate_population_std_dev([10, 10, 10, 10, 50])
        16.0
        >>> calculate_population_std_dev([]) is None
        True
    """
    mean = calculate_mean(values)
    if mean is None:
        return None

    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def calculate_z_score(value: float, mean: float, std_dev: float) -> Optional[float]:
    """
    Calculate z-score (standard score) for a value.

    Args:
        value: Value to score
        mean: Population mean
        std_dev: Population standard deviation

    Returns:
        Z-score, or None if std_dev is zero

    Examples:
        >>> calculate_z_score(110, 100, 10)
        1.0
        >>> calculate_z_score(85, 100, 10)
        -1.5
    """
    if std_dev == 0:
        return None

    return (value - mean) / std_dev


def is_outlier(
    value: float,
    mean: float,
    std_dev: float,
    threshold: float = OUTLIER_STD_THRESHOLD
) -> bool:
    """
    Check whether a value deviates from the mean by more than threshold std devs.

    The comparison is strict, so a value exactly on the boundary is not an
    outlier, and nothing is an outlier when std_dev is zero.

    Examples:
        >>> is_outlier(50, 18, 15)
        True
        >>> is_outlier(50, 18, 16)
        False
    """
    return abs(value - mean) > threshold * std_dev


def summarize_values(values: List[float]) -> dict:
    """
    Mean, max and min of a list, all 0.0 for an empty list.

    Examples:
        >>> summarize_values([8.0, 10.0, 12.0])
        {'mean': 10.0, 'max': 12.0, 'min': 8.0, 'count': 3}
        >>> summarize_values([])
        {'mean': 0.0, 'max': 0.0, 'min': 0.0, 'count': 0}
    """
    if not values:
        return {"mean": 0.0, "max": 0.0, "min": 0.0, "count": 0}

    return {
        "mean": calculate_mean(values),
        "max": max(values),
        "min": min(values),
        "count": len(values),
    }
