"""
Tests for the FuelTracker exception hierarchy.
"""

import pytest

from fueltracker.exceptions import (
    ConfigurationError,
    DatabaseError,
    EntryNotFoundError,
    EntryValidationError,
    FuelTrackerError,
    RegionNotFoundError,
)


class TestExceptions:
    """Tests for exception details and messages."""

    def test_base_str_without_details(self):
        assert str(FuelTrackerError("boom")) == "boom"

    def test_base_str_with_details(self):
        assert str(FuelTrackerError("boom", {"a": 1})) == "boom - {'a': 1}"

    def test_validation_error_details(self):
        error = EntryValidationError("bad liters", field="liters", value="x")

        assert error.details == {"field": "liters", "value": "x"}
        assert error.field == "liters"

    def test_validation_error_keeps_falsy_value(self):
        assert EntryValidationError("bad", field="odometer", value=0).details["value"] == 0

    def test_not_found_details(self):
        assert EntryNotFoundError("missing", entry_id=0).details == {"entry_id": 0}

    def test_configuration_error(self):
        error = ConfigurationError("bad locale", config_key="REPORT_LOCALE")
        assert error.details == {"config_key": "REPORT_LOCALE"}

    @pytest.mark.parametrize("cls", [DatabaseError, EntryValidationError, EntryNotFoundError, ConfigurationError])
    def test_hierarchy(self, cls):
        assert issubclass(cls, FuelTrackerError)

    def test_region_not_found_details(self):
        error = RegionNotFoundError("no prices", region="Berlin")

        assert error.details == {"region": "Berlin"}
        assert isinstance(error, FuelTrackerError)
