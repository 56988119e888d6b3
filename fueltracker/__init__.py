"""
FuelTracker - personal fuel expense tracking and analytics.

Refueling entries go in; data quality issues, summary reports, monthly
aggregates and naive next-fill-up predictions come out.
"""

__version__ = "1.0.0"
