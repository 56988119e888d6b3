"""
Fuel entry routes for FuelTracker.

Handles fuel entry CRUD and the filtered history list.
"""

import logging

from flask import Blueprint, jsonify, request

from fueltracker.config import Config
from fueltracker.database import get_db
from fueltracker.exceptions import (
    DatabaseError,
    EntryNotFoundError,
    EntryValidationError,
    RegionNotFoundError,
)
from fueltracker.models import FuelType
from fueltracker.services import entry_service
from fueltracker.services.history_service import filter_entries, get_unique_fuel_types
from fueltracker.services.price_service import REGIONS, get_current_prices

logger = logging.getLogger(__name__)

fuel_bp = Blueprint('fuel', __name__)


@fuel_bp.route('/fuel/entries', methods=['GET'])
def list_entries():
    """
    Fuel history, newest first, capped at API_MAX_ENTRIES after filtering.

    Query params:
        fuel_type: Only entries of this fuel type
        q: Search text matched against station, notes and date
        locale: Locale used for date matching
    """
    db = get_db()

    entries = entry_service.get_entries(db, newest_first=True)
    filtered = filter_entries(
        entries,
        fuel_type=request.args.get('fuel_type'),
        search_text=request.args.get('q'),
        locale=request.args.get('locale'),
    )

    page = filtered[:Config.API_MAX_ENTRIES]

    return jsonify({
        'entries': [e.to_dict() for e in page],
        'count': len(page),
        'total': len(filtered),
    })


@fuel_bp.route('/fuel/entries', methods=['POST'])
def add_entry():
    """
    Add a fuel entry.

    Request body:
        date: ISO datetime (default: now)
        fuel_type: One of the known fuel types
        liters: Liters purchased
        price_per_liter: Unit price
        total_amount: Optional, defaults to liters * price_per_liter
        odometer: Odometer reading
        station: Optional station name
        notes: Optional notes
    """
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'No data provided'}), 400

    db = get_db()
    try:
        entry = entry_service.add_entry(db, data)
    except EntryValidationError as e:
        return jsonify({'error': 'Validation failed', 'details': e.details, 'message': e.message}), 400
    except DatabaseError:
        return jsonify({'error': 'Could not save entry'}), 500

    return jsonify(entry.to_dict()), 201


@fuel_bp.route('/fuel/entries/<int:entry_id>', methods=['GET'])
def get_entry(entry_id):
    """Get a single fuel entry."""
    db = get_db()
    try:
        entry = entry_service.get_entry(db, entry_id)
    except EntryNotFoundError:
        return jsonify({'error': 'Fuel entry not found'}), 404

    return jsonify(entry.to_dict())


@fuel_bp.route('/fuel/entries/<int:entry_id>', methods=['DELETE'])
def delete_entry(entry_id):
    """Delete a fuel entry."""
    db = get_db()
    try:
        entry_service.delete_entry(db, entry_id)
    except EntryNotFoundError:
        return jsonify({'error': 'Fuel entry not found'}), 404
    except DatabaseError:
        return jsonify({'error': 'Could not delete entry'}), 500

    return jsonify({'message': f'Fuel entry {entry_id} deleted successfully'})


@fuel_bp.route('/fuel/types', methods=['GET'])
def list_fuel_types():
    """Known fuel types and the ones used in the history."""
    db = get_db()
    entries = entry_service.get_entries(db)

    return jsonify({
        'available': [t.value for t in FuelType],
        'in_use': get_unique_fuel_types(entries),
    })


@fuel_bp.route('/fuel/prices', methods=['GET'])
def list_prices():
    """
    Current pump prices for a region.

    Query params:
        region: One of the published regions (default: DEFAULT_PRICE_REGION)
        locale: Locale used for formatted prices
    """
    try:
        prices = get_current_prices(request.args.get('region'), locale=request.args.get('locale'))
    except RegionNotFoundError as e:
        return jsonify({'error': e.message, 'regions': list(REGIONS)}), 400

    return jsonify({
        'region': prices[0]['region'],
        'regions': list(REGIONS),
        'prices': prices,
    })
