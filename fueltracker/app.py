"""
FuelTracker - Flask Application

JSON API over the fuel entry store and the analytics engines.
"""

import logging

from flask import Flask, jsonify

from fueltracker import database
from fueltracker.config import Config
from fueltracker.exceptions import ConfigurationError
from fueltracker.routes import register_blueprints
from fueltracker.services.price_service import REGIONS
from fueltracker.utils.formatting import REPORT_LOCALES

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def validate_config():
    """Fail fast on settings the services cannot work with."""
    if Config.REPORT_LOCALE not in REPORT_LOCALES:
        raise ConfigurationError(
            f"Unsupported REPORT_LOCALE '{Config.REPORT_LOCALE}'",
            config_key='REPORT_LOCALE'
        )
    if Config.DEFAULT_PRICE_REGION not in REGIONS:
        raise ConfigurationError(
            f"Unknown DEFAULT_PRICE_REGION '{Config.DEFAULT_PRICE_REGION}'",
            config_key='DEFAULT_PRICE_REGION'
        )
    if Config.PREDICTION_API_WORKERS < 1:
        raise ConfigurationError(
            'PREDICTION_API_WORKERS must be at least 1',
            config_key='PREDICTION_API_WORKERS'
        )
    if Config.PREDICTION_API_DELAY_SECONDS < 0:
        raise ConfigurationError(
            'PREDICTION_API_DELAY_SECONDS cannot be negative',
            config_key='PREDICTION_API_DELAY_SECONDS'
        )


validate_config()

# Initialize Flask app
app = Flask(__name__)
app.config.from_object(Config)

database.init_app(app)
database.create_tables()
register_blueprints(app)


@app.route('/health')
def health():
    """Liveness check."""
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    app.run(host=Config.FLASK_HOST, port=Config.FLASK_PORT, debug=Config.DEBUG)
