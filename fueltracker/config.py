import os


class Config:
    """Application configuration from environment variables."""

    # Database
    DATABASE_URL = os.environ.get(
        'DATABASE_URL',
        'sqlite:///fuel_tracker.db'
    )

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = FLASK_ENV == 'development'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    SLOW_QUERY_THRESHOLD_MS = float(os.environ.get('SLOW_QUERY_THRESHOLD_MS', 500))

    # API Configuration
    FLASK_HOST = os.environ.get('FLASK_HOST', '127.0.0.1')
    FLASK_PORT = int(os.environ.get('FLASK_PORT', 8080))
    API_MAX_ENTRIES = int(os.environ.get('API_MAX_ENTRIES', 500))

    # Presentation
    REPORT_LOCALE = os.environ.get('REPORT_LOCALE', 'en')
    CURRENCY_SYMBOL = os.environ.get('CURRENCY_SYMBOL', '₺')

    # Fuel price catalogue
    DEFAULT_PRICE_REGION = os.environ.get('DEFAULT_PRICE_REGION', 'Istanbul')

    # Simulated remote prediction
    PREDICTION_API_DELAY_SECONDS = float(os.environ.get('PREDICTION_API_DELAY_SECONDS', 1.0))
    PREDICTION_API_WORKERS = int(os.environ.get('PREDICTION_API_WORKERS', 4))
    PREDICTION_API_TIMEOUT_SECONDS = float(os.environ.get('PREDICTION_API_TIMEOUT_SECONDS', 5.0))
