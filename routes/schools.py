from flask import Blueprint, current_app, jsonify, request

schools_bp = Blueprint('schools', __name__)


@schools_bp.route('/', methods=['GET'])
def list_schools():
    table = current_app.extensions["distance_table"]
    return jsonify({
        "origins": table.list_origins(),
        "destinations": table.list_destinations(),
    })

@schools_bp.route('/distance', methods=['GET'])
def get_distance():
    origin = request.args.get('from')
    destination = request.args.get('to')
    if not origin or not destination:
        return jsonify({"error": "missing_selection", "message": "Please select both schools."}), 400

    miles = current_app.extensions["distance_table"].lookup(origin, destination)
    if miles is None:
        return jsonify({"error": "unknown_route", "message": "No mileage data found for that route."}), 404
    return jsonify({"from": origin, "to": destination, "miles": miles})
