"""
Routes module for FuelTracker Flask blueprints.
"""

from fueltracker.routes.analytics import analytics_bp
from fueltracker.routes.fuel import fuel_bp

__all__ = [
    "fuel_bp",
    "analytics_bp",
]


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(fuel_bp, url_prefix="/api")
    app.register_blueprint(analytics_bp)
