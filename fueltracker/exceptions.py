"""
Custom exceptions for FuelTracker.

The analytics engines never raise; these cover the entry store and the
HTTP layer around it.
"""


class FuelTrackerError(Exception):
    """Base exception for all FuelTracker errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DatabaseError(FuelTrackerError):
    """Database operation failed."""

    pass


class EntryValidationError(FuelTrackerError):
    """A fuel entry payload could not be parsed."""

    def __init__(self, message: str, field: str = None, value=None):
        details = {}
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntryNotFoundError(FuelTrackerError):
    """No fuel entry with the requested id."""

    def __init__(self, message: str, entry_id: int = None):
        details = {}
        if entry_id is not None:
            details['entry_id'] = entry_id
        super().__init__(message, details)
        self.entry_id = entry_id


class ConfigurationError(FuelTrackerError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, config_key: str = None):
        details = {}
        if config_key:
            details['config_key'] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class RegionNotFoundError(FuelTrackerError):
    """No fuel prices are published for the requested region."""

    def __init__(self, message: str, region: str = None):
        details = {}
        if region:
            details['region'] = region
        super().__init__(message, details)
        self.region = region
