"""Utility modules for FuelTracker."""

from .formatting import (
    format_amount,
    format_currency,
    format_entry_date,
    format_period_title,
    get_locale,
    month_name,
    timeframe_name,
)
from .time_utils import (
    current_year_month,
    normalize_datetime,
    parse_datetime,
    utc_now,
)

__all__ = [
    'format_amount',
    'format_currency',
    'format_entry_date',
    'format_period_title',
    'get_locale',
    'month_name',
    'timeframe_name',
    'current_year_month',
    'normalize_datetime',
    'parse_datetime',
    'utc_now',
]
