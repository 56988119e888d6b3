"""
Entry Service

Persistence of fuel entries and the store-side derived fields:
- total_amount defaults to liters * price_per_liter
- distance is the odometer delta to the previous entry by date

Analytics never write back; this is the only module that mutates entries.
"""

import logging
import math
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, asc, desc, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fueltracker.calculations import (
    calculate_distance_since_previous,
    calculate_total_amount,
)
from fueltracker.exceptions import DatabaseError, EntryNotFoundError, EntryValidationError
from fueltracker.models import FuelEntry, FuelType
from fueltracker.utils.time_utils import parse_datetime, utc_now

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("liters", "price_per_liter", "total_amount", "odometer")


def _parse_number(data: dict, field: str) -> float:
    value = data.get(field)
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise EntryValidationError(f"{field} must be a valid number", field=field, value=value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise EntryValidationError(f"{field} must be a valid number", field=field, value=value)
    if not math.isfinite(number):
        raise EntryValidationError(f"{field} must be a finite number", field=field, value=str(value))
    return number


def _parse_date(data: dict) -> datetime:
    raw = data.get("date")
    if raw is None or raw == "":
        return utc_now()

    parsed = parse_datetime(raw)
    if parsed is None:
        raise EntryValidationError("date must be an ISO date or timestamp", field="date", value=raw)
    return parsed


def build_entry(data: dict) -> FuelEntry:
    """
    Build an unsaved FuelEntry from a request payload.

    Raises:
        EntryValidationError: if a number or the date cannot be parsed
    """
    if not isinstance(data, dict):
        raise EntryValidationError("Entry payload must be an object")

    values = {field: _parse_number(data, field) for field in NUMERIC_FIELDS}
    notes = data.get("notes")

    return FuelEntry(
        date=_parse_date(data),
        fuel_type=FuelType.normalize(data.get("fuel_type") or FuelType.BENZIN_95.value).value,
        station=(data.get("station") or "").strip(),
        notes=notes.strip() if isinstance(notes, str) and notes.strip() else None,
        **values,
    )


def prepare_entry(entry: FuelEntry, previous_odometer: Optional[float]) -> FuelEntry:
    """
    Fill the derived fields of a new entry.

    A zero or missing total_amount becomes liters * price_per_liter; a
    user-entered total is kept. distance is set only when there is a
    previous odometer reading.
    """
    if not entry.total_amount:
        entry.total_amount = calculate_total_amount(entry.liters, entry.price_per_liter)

    if previous_odometer is not None:
        entry.distance = calculate_distance_since_previous(entry.odometer, previous_odometer)

    return entry


def _before(when: datetime, entry_id: Optional[int]):
    """Entries ahead of (when, entry_id) in store order; same-date entries are ordered by id."""
    if entry_id is None:
        return FuelEntry.date <= when
    return or_(FuelEntry.date < when, and_(FuelEntry.date == when, FuelEntry.id < entry_id))


def _after(when: datetime, entry_id: Optional[int]):
    if entry_id is None:
        return FuelEntry.date > when
    return or_(FuelEntry.date > when, and_(FuelEntry.date == when, FuelEntry.id > entry_id))


def get_previous_entry(
    db: Session,
    when: datetime,
    entry_id: Optional[int] = None,
    exclude_id: Optional[int] = None,
) -> Optional[FuelEntry]:
    """
    Entry directly before a position in (date, id) order.

    Without entry_id the position is that of a new, unsaved entry, which
    sorts after every stored entry of the same date.
    """
    query = db.query(FuelEntry).filter(_before(when, entry_id))
    if exclude_id is not None:
        query = query.filter(FuelEntry.id != exclude_id)
    return query.order_by(desc(FuelEntry.date), desc(FuelEntry.id)).first()


def get_next_entry(
    db: Session,
    when: datetime,
    entry_id: Optional[int] = None,
    exclude_id: Optional[int] = None,
) -> Optional[FuelEntry]:
    """Entry directly after a position in (date, id) order."""
    query = db.query(FuelEntry).filter(_after(when, entry_id))
    if exclude_id is not None:
        query = query.filter(FuelEntry.id != exclude_id)
    return query.order_by(asc(FuelEntry.date), asc(FuelEntry.id)).first()


def _refresh_distance(db: Session, entry: Optional[FuelEntry], exclude_id: Optional[int] = None):
    """Recompute an entry's distance against its current predecessor."""
    if entry is None:
        return

    previous = get_previous_entry(db, entry.date, entry_id=entry.id, exclude_id=exclude_id)
    entry.distance = calculate_distance_since_previous(
        entry.odometer,
        previous.odometer if previous else None,
    )


def _commit(db: Session, action: str):
    """Flush and commit pending changes, surfacing any failure as DatabaseError."""
    try:
        db.flush()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        raise DatabaseError(f"Failed to {action}", {"error": str(e)})


def add_entry(db: Session, data: dict) -> FuelEntry:
    """
    Validate, derive and persist a new fuel entry.

    The new entry goes after any stored entry with the same date. An entry
    back-dated between two existing ones also updates the distance of the
    entry that follows it.

    Raises:
        EntryValidationError: malformed payload
        DatabaseError: the insert failed
    """
    entry = build_entry(data)

    previous = get_previous_entry(db, entry.date)
    prepare_entry(entry, previous.odometer if previous else None)

    following = get_next_entry(db, entry.date)
    if following is not None:
        following.distance = calculate_distance_since_previous(following.odometer, entry.odometer)

    db.add(entry)
    _commit(db, "add fuel entry")

    logger.info(f"Added fuel entry {entry.id} ({entry.liters} L on {entry.date.date()})")
    return entry


def get_entries(db: Session, newest_first: bool = False, limit: Optional[int] = None) -> List[FuelEntry]:
    """
    All fuel entries ordered by date, then id.

    Analytics expect the default oldest-first order.
    """
    order = desc if newest_first else asc
    query = db.query(FuelEntry).order_by(order(FuelEntry.date), order(FuelEntry.id))
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_entry(db: Session, entry_id: int) -> FuelEntry:
    """
    Raises:
        EntryNotFoundError: no entry with this id
    """
    entry = db.query(FuelEntry).filter(FuelEntry.id == entry_id).first()
    if entry is None:
        raise EntryNotFoundError(f"Fuel entry {entry_id} not found", entry_id=entry_id)
    return entry


def delete_entry(db: Session, entry_id: int) -> None:
    """
    Delete an entry and re-link the distance of the entry after it.

    Raises:
        EntryNotFoundError: no entry with this id
        DatabaseError: the delete failed
    """
    entry = get_entry(db, entry_id)
    following = get_next_entry(db, entry.date, entry_id=entry.id)

    _refresh_distance(db, following, exclude_id=entry.id)
    db.delete(entry)
    _commit(db, "delete fuel entry")

    logger.info(f"Deleted fuel entry {entry_id}")
