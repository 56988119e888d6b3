"""
Analytics routes for FuelTracker.

Exposes monthly aggregates, the summary report, data quality issues and
next fill-up predictions over the stored entries.
"""

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError

from flask import Blueprint, jsonify, request

from fueltracker.config import Config
from fueltracker.database import get_db
from fueltracker.models import TimeFrame
from fueltracker.services import (
    aggregate_by_month,
    describe_outliers,
    entry_service,
    generate_report,
    predict_next_consumption,
    predict_next_consumption_async,
    predict_next_total_amount,
    predict_next_total_amount_async,
    select_period,
    summarize_entries,
    validate_entries,
)
from fueltracker.utils.formatting import format_period_title, timeframe_name

logger = logging.getLogger(__name__)

analytics_bp = Blueprint("analytics", __name__)


def _period_args(default=TimeFrame.MONTH):
    """
    Read timeframe/month/year query params.

    Returns:
        (time_frame, month, year), or None if the timeframe is unknown
    """
    raw = request.args.get("timeframe", default.value)
    try:
        time_frame = TimeFrame(raw)
    except ValueError:
        return None

    return time_frame, request.args.get("month", type=int), request.args.get("year", type=int)


def _selected_entries(db, default=TimeFrame.MONTH):
    period = _period_args(default)
    if period is None:
        return None, None

    time_frame, month, year = period
    entries = select_period(entry_service.get_entries(db), time_frame, month=month, year=year)
    return time_frame, entries


def _invalid_timeframe():
    allowed = ", ".join(t.value for t in TimeFrame)
    return jsonify({"error": f"timeframe must be one of: {allowed}"}), 400


@analytics_bp.route("/api/analytics/period", methods=["GET"])
def get_period_entries():
    """
    Entries in the selected period, oldest first.

    Query params:
        - timeframe: month, year or all (default: month)
        - month, year: Period (default: current)
    """
    try:
        time_frame, entries = _selected_entries(get_db())
        if time_frame is None:
            return _invalid_timeframe()

        return jsonify({
            "timeframe": time_frame.value,
            "entries": [e.to_dict() for e in entries],
            "count": len(entries),
        }), 200

    except Exception as e:
        logger.error(f"Error selecting period: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500


@analytics_bp.route("/api/analytics/monthly", methods=["GET"])
def get_monthly_aggregates():
    """
    Monthly totals for the selected period, most recent month first.

    The chart covers every month unless a timeframe is given.
    """
    try:
        time_frame, entries = _selected_entries(get_db(), default=TimeFrame.ALL)
        if time_frame is None:
            return _invalid_timeframe()

        locale = request.args.get("locale")
        months = aggregate_by_month(entries)
        for month in months:
            month["title"] = format_period_title(month["year"], month["month"], locale)

        return jsonify({
            "timeframe": time_frame.value,
            "timeframe_name": timeframe_name(time_frame, locale),
            "months": months,
        }), 200

    except Exception as e:
        logger.error(f"Error aggregating monthly expenses: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500


@analytics_bp.route("/api/analytics/report", methods=["GET"])
def get_report():
    """Text report and raw summary for the selected period."""
    try:
        time_frame, entries = _selected_entries(get_db())
        if time_frame is None:
            return _invalid_timeframe()

        locale = request.args.get("locale")
        return jsonify({
            "timeframe": time_frame.value,
            "report": generate_report(entries, locale=locale),
            "summary": summarize_entries(entries),
        }), 200

    except Exception as e:
        logger.error(f"Error generating report: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500


@analytics_bp.route("/api/analytics/issues", methods=["GET"])
def get_issues():
    """Data quality issues over all entries."""
    try:
        entries = entry_service.get_entries(get_db())
        return jsonify({
            "issues": validate_entries(entries, locale=request.args.get("locale")),
            "outliers": describe_outliers(entries),
        }), 200

    except Exception as e:
        logger.error(f"Error validating entries: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500


@analytics_bp.route("/api/analytics/predictions", methods=["GET"])
def get_predictions():
    """
    Next fill-up predictions.

    Query params:
        - simulated: "true" to also query the simulated remote predictor
    """
    try:
        entries = entry_service.get_entries(get_db())
        result = {
            "next_consumption": predict_next_consumption(entries),
            "next_total_amount": predict_next_total_amount(entries),
        }

        if request.args.get("simulated", "false").lower() == "true":
            consumption_future = predict_next_consumption_async(entries)
            amount_future = predict_next_total_amount_async(entries)
            try:
                result["simulated"] = {
                    "next_liters": consumption_future.result(timeout=Config.PREDICTION_API_TIMEOUT_SECONDS),
                    "next_total_amount": amount_future.result(timeout=Config.PREDICTION_API_TIMEOUT_SECONDS),
                }
            except FutureTimeoutError:
                logger.warning("Simulated prediction timed out")
                result["simulated"] = None

        return jsonify(result), 200

    except Exception as e:
        logger.error(f"Error predicting next fill-up: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500
