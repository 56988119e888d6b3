"""
Calculation Constants for FuelTracker

Centralized location for the fixed constants used by the analytics engines.
Runtime-tunable values are read from Config.
"""

from fueltracker.config import Config

# Consumption
CONSUMPTION_DISTANCE_BASE = 100.0  # Consumption is liters per 100 distance units
FALLBACK_DISTANCE = 1.0  # Divisor used by the naive predictor when distance is missing

# Outlier detection
OUTLIER_STD_THRESHOLD = 2.0  # Deviations beyond this many population std devs are outliers
MIN_OUTLIER_SAMPLE_SIZE = 3  # Fewer consumption samples than this never yield outliers

# Prediction
PREDICTION_WINDOW_SIZE = 2  # Entries blended by the synchronous predictor
API_PREDICTION_WINDOW_SIZE = 5  # Entries sent to the simulated remote predictor
API_JITTER_MIN = 0.9  # Lower bound of the simulated noise factor
API_JITTER_MAX = 1.1  # Upper bound of the simulated noise factor
API_PREDICTION_DELAY_SECONDS = Config.PREDICTION_API_DELAY_SECONDS
