"""
Consumption and Cost Calculations

Derived per-entry metrics shared by every engine:
- Consumption (liters per 100 distance units)
- Entry totals and average unit price
- Odometer distances
"""

from typing import Optional

from .constants import CONSUMPTION_DISTANCE_BASE, FALLBACK_DISTANCE


def calculate_consumption(liters: float, distance: Optional[float]) -> Optional[float]:
    """
    Calculate consumption in liters per 100 distance units.

    Args:
        liters: Fuel volume purchased
        distance: Distance traveled since the previous fill-up

    Returns:
        Consumption, or None if distance is missing or not positive

    Examples:
        >>> calculate_consumption(40.0, 500.0)
        8.0
        >>> calculate_consumption(40.0, None) is None
        True
        >>> calculate_consumption(40.0, 0) is None
        True
    """
    if liters is None or distance is None or distance <= 0:
        return None

    return (liters * CONSUMPTION_DISTANCE_BASE) / distance


def entry_consumption(entry) -> Optional[float]:
    """Consumption of a single fuel entry, None when undefined."""
    return calculate_consumption(entry.liters, entry.distance)


def calculate_consumption_with_fallback(liters: float, distance: Optional[float]) -> float:
    """
    Consumption that substitutes a unit distance when none is known.

    Missing (or zero) distance yields liters * 100. Degenerate, but it is
    what the naive predictor has always reported.

    Examples:
        >>> calculate_consumption_with_fallback(45.0, 450.0)
        10.0
        >>> calculate_consumption_with_fallback(45.0, None)
        4500.0
    """
    divisor = distance if distance else FALLBACK_DISTANCE
    return (liters * CONSUMPTION_DISTANCE_BASE) / divisor


def calculate_total_amount(liters: float, price_per_liter: float) -> float:
    """
    Amount paid for a fill-up.

    Examples:
        >>> calculate_total_amount(10.0, 2.0)
        20.0
    """
    return liters * price_per_liter


def calculate_average_price_per_liter(total_amount: float, total_liters: float) -> float:
    """
    Average unit price over a set of fill-ups.

    Returns:
        total_amount / total_liters, or 0.0 when no liters were bought

    Examples:
        >>> calculate_average_price_per_liter(100.0, 40.0)
        2.5
        >>> calculate_average_price_per_liter(100.0, 0.0)
        0.0
    """
    if total_liters > 0:
        return total_amount / total_liters
    return 0.0


def calculate_odometer_distance(first_odometer: float, last_odometer: float) -> float:
    """
    Distance covered between two odometer readings.

    Corrected or out-of-order readings (last below first) give 0.0.

    Examples:
        >>> calculate_odometer_distance(1000.0, 1450.0)
        450.0
        >>> calculate_odometer_distance(1450.0, 1000.0)
        0.0
    """
    if first_odometer < last_odometer:
        return last_odometer - first_odometer
    return 0.0


def calculate_distance_since_previous(
    odometer: float,
    previous_odometer: Optional[float]
) -> Optional[float]:
    """
    Odometer delta since the previous fill-up.

    Returns:
        odometer - previous_odometer, or None without a previous reading.
        Negative deltas are kept so validation can flag them.

    Examples:
        >>> calculate_distance_since_previous(10500.0, 10000.0)
        500.0
        >>> calculate_distance_since_previous(10500.0, None) is None
        True
    """
    if odometer is None or previous_odometer is None:
        return None

    return odometer - previous_odometer
