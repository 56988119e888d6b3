"""
Database session management for FuelTracker.

One engine and one scoped session factory per process. Blueprints get a
request-bound session through get_db(); the session is rolled back on
request errors and removed when the app context tears down.
"""

import logging
import time

from flask import g
from sqlalchemy import event
from sqlalchemy.orm import scoped_session, sessionmaker

from fueltracker.config import Config
from fueltracker.models import Base, get_engine

logger = logging.getLogger(__name__)

engine = get_engine(Config.DATABASE_URL)
SessionLocal = scoped_session(sessionmaker(bind=engine))


@event.listens_for(engine, "before_cursor_execute")
def _start_query_timer(conn, cursor, statement, parameters, context, executemany):
    conn.info.setdefault("query_started_at", []).append(time.perf_counter())


@event.listens_for(engine, "after_cursor_execute")
def _log_slow_query(conn, cursor, statement, parameters, context, executemany):
    """Warn about entry queries slower than SLOW_QUERY_THRESHOLD_MS."""
    elapsed_ms = (time.perf_counter() - conn.info["query_started_at"].pop()) * 1000
    if elapsed_ms <= Config.SLOW_QUERY_THRESHOLD_MS:
        return

    query = " ".join(statement.split())
    if len(query) > 200:
        query = query[:200] + "..."
    logger.warning(f"Slow query ({elapsed_ms:.1f}ms): {query}", extra={"duration_ms": elapsed_ms})


def create_tables():
    """Create the fuel entry schema if it does not exist yet."""
    Base.metadata.create_all(engine)
    logger.info(f"Database ready: {', '.join(sorted(Base.metadata.tables))}")


def get_db():
    """Session bound to the current app context, created on first use."""
    if "db" not in g:
        g.db = SessionLocal()
    return g.db


def close_db(exception=None):
    """Teardown hook: roll back after a failed request, then release the session."""
    db = g.pop("db", None)
    if db is None:
        return

    if exception is not None:
        logger.debug(f"Rolling back request session after error: {exception}")
        db.rollback()
    SessionLocal.remove()


def init_app(app):
    app.teardown_appcontext(close_db)
