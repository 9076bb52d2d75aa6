from flask import Blueprint, Response, current_app, g, jsonify, request
from models.ledger import Ledger
from utils.auth import login_required
from utils.errors import LedgerError
import logging

logger = logging.getLogger(__name__)

trips_bp = Blueprint('trips', __name__)


def _load_ledger():
    return Ledger.load(
        g.user_id,
        current_app.extensions["distance_table"],
        current_app.extensions["trip_store"],
        current_app.config["MILEAGE_RATE"],
    )

def _owner_lock():
    return current_app.extensions["owner_locks"].hold(g.user_id)

def _error(e):
    return jsonify(e.to_dict()), e.status


@trips_bp.route('/', methods=['GET'])
@login_required
def get_trips():
    try:
        with _owner_lock():
            ledger = _load_ledger()
            return jsonify({
                "trips": [trip.to_dict() for trip in ledger.trips],
                "summary": ledger.summary(),
            })
    except LedgerError as e:
        return _error(e)

@trips_bp.route('/', methods=['POST'])
@login_required
def add_trip():
    data = request.get_json(silent=True) or {}
    try:
        with _owner_lock():
            ledger = _load_ledger()
            trip = ledger.add_trip(data.get('from'), data.get('to'))
            return jsonify({
                "message": "Trip added successfully.",
                "trip": trip.to_dict(),
                "summary": ledger.summary(),
            }), 201
    except LedgerError as e:
        return _error(e)

@trips_bp.route('/<trip_id>', methods=['DELETE'])
@login_required
def delete_trip(trip_id):
    try:
        with _owner_lock():
            ledger = _load_ledger()
            ledger.remove_trip(trip_id)
            return jsonify({"message": "Trip deleted.", "summary": ledger.summary()})
    except LedgerError as e:
        return _error(e)

@trips_bp.route('/', methods=['DELETE'])
@login_required
def clear_trips():
    if request.args.get('confirm', '').lower() != 'true':
        return jsonify({
            "error": "confirmation_required",
            "message": "Clearing all trips cannot be undone. Repeat with confirm=true.",
        }), 400
    try:
        with _owner_lock():
            removed = _load_ledger().remove_all()
            return jsonify({"message": "All trips cleared.", "removed": removed})
    except LedgerError as e:
        return _error(e)

@trips_bp.route('/summary', methods=['GET'])
@login_required
def get_summary():
    try:
        with _owner_lock():
            return jsonify(_load_ledger().summary())
    except LedgerError as e:
        return _error(e)

@trips_bp.route('/export', methods=['GET'])
@login_required
def export_trips():
    try:
        with _owner_lock():
            report = _load_ledger().export_report()
    except LedgerError as e:
        return _error(e)

    logger.info(f"Exported {len(report) - 3} trips for owner {g.user_id}")
    return Response(
        report.to_csv(),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={report.filename()}"},
    )
