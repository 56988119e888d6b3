"""
Tests for history filtering.
"""

from datetime import datetime

import pytest

from fueltracker.services.history_service import filter_entries, get_unique_fuel_types


@pytest.fixture
def history(entry_factory):
    return [
        entry_factory.build(date=datetime(2024, 4, 2, 9, 30), fuel_type="Benzin-95",
                            station="Shell Kadıköy", notes="Highway trip"),
        entry_factory.build(date=datetime(2024, 3, 18, 17, 5), fuel_type="Dizel",
                            station="Opet", notes=None),
        entry_factory.build(date=datetime(2024, 3, 1, 8, 0), fuel_type="LPG",
                            station="Aytemiz", notes="city driving"),
        entry_factory.build(date=datetime(2024, 2, 11, 12, 0), fuel_type="Benzin-95",
                            station="BP", notes=None),
    ]


class TestFilterEntries:
    """Tests for filter_entries."""

    def test_no_filters(self, history):
        assert filter_entries(history) == history

    def test_fuel_type(self, history):
        assert filter_entries(history, fuel_type="Benzin-95") == [history[0], history[3]]

    def test_empty_fuel_type_ignored(self, history):
        assert filter_entries(history, fuel_type="") == history

    def test_search_station_case_insensitive(self, history):
        assert filter_entries(history, search_text="opet") == [history[1]]

    def test_search_notes(self, history):
        assert filter_entries(history, search_text="CITY") == [history[2]]

    def test_search_formatted_date(self, history):
        assert filter_entries(history, search_text="2024-03") == [history[1], history[2]]

    def test_search_date_in_turkish_format(self, history):
        assert filter_entries(history, search_text="11.02.2024", locale="tr") == [history[3]]

    def test_combined_filters(self, history):
        assert filter_entries(history, fuel_type="Benzin-95", search_text="shell") == [history[0]]

    def test_no_match(self, history):
        assert filter_entries(history, search_text="Total") == []


class TestUniqueFuelTypes:
    """Tests for get_unique_fuel_types."""

    def test_sorted_distinct(self, history):
        assert get_unique_fuel_types(history) == ["Benzin-95", "Dizel", "LPG"]

    def test_empty(self):
        assert get_unique_fuel_types([]) == []
