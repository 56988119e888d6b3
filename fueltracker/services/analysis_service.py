"""
Data Analysis Service

Data quality checks and summary reporting over fuel entries:
- Field-level validation issues
- Consumption outlier detection (z-score, population std dev)
- Plain-text summary report

All functions are pure; they read entries and never raise on missing
optional fields.
"""

import logging
from typing import Dict, List, Optional

from fueltracker.calculations import (
    calculate_mean,
    calculate_population_std_dev,
    calculate_z_score,
    entry_consumption,
    is_outlier,
    summarize_values,
)
from fueltracker.calculations.constants import MIN_OUTLIER_SAMPLE_SIZE
from fueltracker.utils.formatting import (
    format_amount,
    format_currency,
    format_entry_date,
    get_locale,
)

logger = logging.getLogger(__name__)


def _consumption_statistics(entries) -> Optional[Dict]:
    """Mean and population std dev of defined consumptions, None below the sample floor."""
    consumptions = [c for c in (entry_consumption(e) for e in entries) if c is not None]

    if len(consumptions) < MIN_OUTLIER_SAMPLE_SIZE:
        logger.debug(
            f"Outlier detection skipped: {len(consumptions)} consumption samples "
            f"(need {MIN_OUTLIER_SAMPLE_SIZE})"
        )
        return None

    return {
        "mean": calculate_mean(consumptions),
        "std_dev": calculate_population_std_dev(consumptions),
        "sample_size": len(consumptions),
    }


def detect_outliers(entries) -> List:
    """
    Find entries whose consumption is unusually far from the average.

    An entry is an outlier when |consumption - mean| > 2 * std, using the
    population standard deviation over all entries with a positive distance.
    Fewer than 3 such entries never produce outliers.

    Returns:
        Outlier entries in input order
    """
    stats = _consumption_statistics(entries)
    if stats is None:
        return []

    outliers = []
    for entry in entries:
        consumption = entry_consumption(entry)
        if consumption is None:
            continue
        if is_outlier(consumption, stats["mean"], stats["std_dev"]):
            outliers.append(entry)

    if outliers:
        logger.debug(f"Detected {len(outliers)} consumption outliers in {stats['sample_size']} samples")

    return outliers


def describe_outliers(entries) -> List[Dict]:
    """
    Outlier entries with their consumption and z-score, for API consumers.
    """
    stats = _consumption_statistics(entries)
    if stats is None:
        return []

    described = []
    for entry in detect_outliers(entries):
        consumption = entry_consumption(entry)
        z_score = calculate_z_score(consumption, stats["mean"], stats["std_dev"])
        described.append({
            "entry_id": getattr(entry, "id", None),
            "date": entry.date.isoformat() if entry.date else None,
            "consumption": round(consumption, 2),
            "z_score": round(z_score, 2) if z_score is not None else None,
            "mean_consumption": round(stats["mean"], 2),
        })
    return described


def validate_entries(entries, locale: Optional[str] = None) -> List[str]:
    """
    Collect data quality issues.

    One message per violated rule per entry (in input order), then one
    message per consumption outlier.

    Args:
        entries: Fuel entries
        locale: Locale code for the messages

    Returns:
        List of human-readable issue strings
    """
    messages = get_locale(locale)["issues"]
    issues = []

    for entry in entries:
        date = format_entry_date(entry.date, locale)
        if entry.liters <= 0:
            issues.append(messages["liters"].format(date=date))
        if entry.price_per_liter <= 0:
            issues.append(messages["price_per_liter"].format(date=date))
        if entry.odometer < 0:
            issues.append(messages["odometer"].format(date=date))
        if entry.distance is not None and entry.distance < 0:
            issues.append(messages["distance"].format(date=date))

    for entry in detect_outliers(entries):
        issues.append(messages["outlier"].format(date=format_entry_date(entry.date, locale)))

    return issues


def summarize_entries(entries) -> Dict:
    """
    Spending and consumption totals behind the report.

    The average amount is per entry, not per period. Consumption figures
    cover entries with a positive distance only and are 0.0 when none has one.
    """
    entry_count = len(entries)
    total_amount = sum(e.total_amount for e in entries)
    total_liters = sum(e.liters for e in entries)
    consumptions = [c for c in (entry_consumption(e) for e in entries) if c is not None]
    consumption = summarize_values(consumptions)

    return {
        "entry_count": entry_count,
        "total_amount": total_amount,
        "average_amount": total_amount / entry_count if entry_count else 0.0,
        "total_liters": total_liters,
        "average_consumption": consumption["mean"],
        "max_consumption": consumption["max"],
        "min_consumption": consumption["min"],
        "consumption_sample_size": consumption["count"],
    }


def generate_report(entries, locale: Optional[str] = None, currency_symbol: Optional[str] = None) -> str:
    """
    Build the multi-line summary report.

    Lines, in order: total spend, average spend per entry, total liters,
    average/max/min consumption. Empty input gives the locale's
    "no records" message.
    """
    table = get_locale(locale)
    if not entries:
        return table["no_records"]

    summary = summarize_entries(entries)
    labels = table["report"]
    volume = table["volume_unit"]
    unit = table["consumption_unit"]

    lines = [
        f"{labels['total_amount']}: {format_currency(summary['total_amount'], locale, currency_symbol)}",
        f"{labels['average_amount']}: {format_currency(summary['average_amount'], locale, currency_symbol)}",
        f"{labels['total_liters']}: {format_amount(summary['total_liters'], locale)} {volume}",
        f"{labels['average_consumption']}: {format_amount(summary['average_consumption'], locale)} {unit}",
        f"{labels['max_consumption']}: {format_amount(summary['max_consumption'], locale)} {unit}",
        f"{labels['min_consumption']}: {format_amount(summary['min_consumption'], locale)} {unit}",
    ]
    return "\n".join(lines)
