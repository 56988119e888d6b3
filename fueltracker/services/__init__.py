"""
Services module for FuelTracker business logic.

The analysis, aggregation, prediction and history services are pure
functions over a list of fuel entries; the entry service owns persistence.
"""

from fueltracker.services.analysis_service import (
    describe_outliers,
    detect_outliers,
    generate_report,
    summarize_entries,
    validate_entries,
)
from fueltracker.services.aggregation_service import (
    aggregate_by_month,
    select_period,
)
from fueltracker.services.prediction_service import (
    predict_next_consumption,
    predict_next_consumption_async,
    predict_next_total_amount,
    predict_next_total_amount_async,
)
from fueltracker.services.history_service import (
    filter_entries,
    get_unique_fuel_types,
)
from fueltracker.services.price_service import (
    get_current_prices,
    resolve_region,
)

__all__ = [
    # Analysis
    'validate_entries',
    'detect_outliers',
    'describe_outliers',
    'summarize_entries',
    'generate_report',
    # Aggregation
    'aggregate_by_month',
    'select_period',
    # Prediction
    'predict_next_consumption',
    'predict_next_total_amount',
    'predict_next_consumption_async',
    'predict_next_total_amount_async',
    # History
    'filter_entries',
    'get_unique_fuel_types',
    # Prices
    'get_current_prices',
    'resolve_region',
]
