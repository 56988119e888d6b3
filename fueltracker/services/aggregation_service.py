"""
Aggregation Service

Monthly grouping and period selection for charts.

Callers pass entries sorted by date ascending. Month totals do not
re-sort: the distance driven in a month is last.odometer - first.odometer
in the order the entries were given.
"""

import logging
from typing import Dict, List, Optional, Tuple

from fueltracker.calculations import (
    calculate_average_price_per_liter,
    calculate_odometer_distance,
)
from fueltracker.models import TimeFrame
from fueltracker.utils.time_utils import current_year_month

logger = logging.getLogger(__name__)


def group_entries_by_month(entries) -> Dict[Tuple[int, int], List]:
    """
    Group entries by calendar (year, month) of their date.

    Each group keeps the relative order of the input.
    """
    groups: Dict[Tuple[int, int], List] = {}
    for entry in entries:
        key = (entry.date.year, entry.date.month)
        groups.setdefault(key, []).append(entry)
    return groups


def build_monthly_aggregate(year: int, month: int, entries: List) -> Dict:
    """
    Totals for one calendar month.

    Returns:
        Dict with year, month, total_amount, total_liters,
        average_price_per_liter, total_distance, number_of_entries
    """
    total_amount = sum(e.total_amount for e in entries)
    total_liters = sum(e.liters for e in entries)

    total_distance = 0.0
    if entries:
        total_distance = calculate_odometer_distance(entries[0].odometer, entries[-1].odometer)

    return {
        "year": year,
        "month": month,
        "total_amount": total_amount,
        "total_liters": total_liters,
        "average_price_per_liter": calculate_average_price_per_liter(total_amount, total_liters),
        "total_distance": total_distance,
        "number_of_entries": len(entries),
    }


def aggregate_by_month(entries) -> List[Dict]:
    """
    Monthly aggregates, most recent month first.

    Returns:
        One aggregate per calendar month present in the input, sorted by
        year descending then month descending
    """
    groups = group_entries_by_month(entries)

    aggregates = [
        build_monthly_aggregate(year, month, month_entries)
        for (year, month), month_entries in groups.items()
    ]
    aggregates.sort(key=lambda a: (a["year"], a["month"]), reverse=True)

    logger.debug(f"Aggregated {len(entries)} entries into {len(aggregates)} months")
    return aggregates


def select_period(
    entries,
    time_frame=TimeFrame.MONTH,
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> List:
    """
    Filter entries to the selected analytics period.

    Args:
        entries: Fuel entries
        time_frame: TimeFrame (or its string value) - month, year or all
        month: Calendar month for TimeFrame.MONTH (default: current month)
        year: Calendar year for MONTH and YEAR (default: current year)

    Returns:
        Matching entries in input order; empty list when nothing matches
    """
    time_frame = TimeFrame(time_frame)

    if time_frame == TimeFrame.ALL:
        return list(entries)

    current_year, current_month = current_year_month()
    year = current_year if year is None else year

    if time_frame == TimeFrame.YEAR:
        return [e for e in entries if e.date.year == year]

    month = current_month if month is None else month
    return [e for e in entries if e.date.year == year and e.date.month == month]
