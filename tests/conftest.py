"""
Pytest fixtures for FuelTracker tests.
"""

import os

import pytest

# Configure BEFORE importing the app so the engine binds to in-memory SQLite
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['PREDICTION_API_DELAY_SECONDS'] = '0'
os.environ['REPORT_LOCALE'] = 'en'
os.environ['CURRENCY_SYMBOL'] = '₺'

from fueltracker.app import app as flask_app  # noqa: E402
from fueltracker.database import SessionLocal, engine  # noqa: E402
from fueltracker.models import Base  # noqa: E402

from tests.factories import FuelEntryFactory, build_consumption_series  # noqa: E402


@pytest.fixture
def app():
    """Create application for testing."""
    flask_app.config['TESTING'] = True

    Base.metadata.create_all(engine)

    yield flask_app

    SessionLocal.remove()
    Base.metadata.drop_all(engine)


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Provide a database session for tests."""
    session = SessionLocal()
    yield session
    session.rollback()
    SessionLocal.remove()


@pytest.fixture
def entry_factory():
    return FuelEntryFactory


@pytest.fixture
def two_month_entries():
    """Four fill-ups over January and February 2024, oldest first."""
    from datetime import datetime

    return [
        FuelEntryFactory.build(date=datetime(2024, 1, 5), liters=40.0, price_per_liter=2.0,
                               total_amount=80.0, odometer=10000.0),
        FuelEntryFactory.build(date=datetime(2024, 1, 20), liters=35.0, price_per_liter=2.2,
                               total_amount=77.0, odometer=10450.0, distance=450.0),
        FuelEntryFactory.build(date=datetime(2024, 2, 3), liters=42.0, price_per_liter=2.1,
                               total_amount=88.2, odometer=10950.0, distance=500.0),
        FuelEntryFactory.build(date=datetime(2024, 2, 25), liters=38.0, price_per_liter=2.0,
                               total_amount=76.0, odometer=11400.0, distance=450.0),
    ]


@pytest.fixture
def consumption_series():
    """Factory for entries whose consumptions equal the given values."""
    return build_consumption_series
