"""
History Service

Filters for the fuel history list: fuel type, free-text search and the
fuel types actually in use.
"""

from typing import List, Optional

from fueltracker.utils.formatting import format_entry_date


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.casefold()


def filter_entries(
    entries,
    fuel_type: Optional[str] = None,
    search_text: Optional[str] = None,
    locale: Optional[str] = None,
) -> List:
    """
    Filter history entries.

    Args:
        entries: Fuel entries
        fuel_type: Keep only this exact fuel type label (ignored when empty)
        search_text: Case-insensitive match against station, notes and the
            formatted entry date (ignored when empty)
        locale: Locale used to format dates for searching

    Returns:
        Matching entries in input order
    """
    filtered = list(entries)

    if fuel_type:
        filtered = [e for e in filtered if e.fuel_type == fuel_type]

    if search_text:
        needle = search_text.casefold()
        filtered = [
            e for e in filtered
            if _contains(e.station, needle)
            or _contains(e.notes, needle)
            or _contains(format_entry_date(e.date, locale), needle)
        ]

    return filtered


def get_unique_fuel_types(entries) -> List[str]:
    """Sorted distinct fuel type labels present in the entries."""
    return sorted({e.fuel_type for e in entries if e.fuel_type})
