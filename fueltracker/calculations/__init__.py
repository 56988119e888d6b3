"""
FuelTracker Calculation Module

Consumption, cost and statistical helpers shared by the analytics engines.

Usage:
    from fueltracker.calculations import calculate_consumption, is_outlier
    from fueltracker.calculations.constants import OUTLIER_STD_THRESHOLD
"""

# Consumption and cost
from .consumption import (
    calculate_average_price_per_liter,
    calculate_consumption,
    calculate_consumption_with_fallback,
    calculate_distance_since_previous,
    calculate_odometer_distance,
    calculate_total_amount,
    entry_consumption,
)

# Statistics
from .statistics import (
    calculate_mean,
    calculate_population_std_dev,
    calculate_z_score,
    is_outlier,
    summarize_values,
)

# Constants (re-export for convenience)
from .constants import (
    API_JITTER_MAX,
    API_JITTER_MIN,
    API_PREDICTION_WINDOW_SIZE,
    MIN_OUTLIER_SAMPLE_SIZE,
    OUTLIER_STD_THRESHOLD,
    PREDICTION_WINDOW_SIZE,
)

__all__ = [
    # Consumption
    "calculate_consumption",
    "calculate_consumption_with_fallback",
    "entry_consumption",
    "calculate_total_amount",
    "calculate_average_price_per_liter",
    "calculate_odometer_distance",
    "calculate_distance_since_previous",
    # Statistics
    "calculate_mean",
    "calculate_population_std_dev",
    "calculate_z_score",
    "is_outlier",
    "summarize_values",
    # Constants
    "OUTLIER_STD_THRESHOLD",
    "MIN_OUTLIER_SAMPLE_SIZE",
    "PREDICTION_WINDOW_SIZE",
    "API_PREDICTION_WINDOW_SIZE",
    "API_JITTER_MIN",
    "API_JITTER_MAX",
]
