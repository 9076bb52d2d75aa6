from flask import Flask, request, jsonify
from flask_migrate import Migrate
from flask_cors import CORS
import os
from database.db import db
from database.store import SQLTripStore
from models.distance import DistanceTable
from routes.auth import auth_bp
from routes.schools import schools_bp
from routes.trips import trips_bp
from utils.locks import OwnerLocks
import logging
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'mileage_data.json')
SEVEN_DAYS = 7 * 24 * 60 * 60

migrate = Migrate()


def create_app(test_config=None):
    app = Flask(__name__)

    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///mileage.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['ALLOWED_ORIGINS'] = os.environ.get('ALLOWED_ORIGINS', '*').split(',')
    app.config['MILEAGE_RATE'] = float(os.environ.get('MILEAGE_RATE', '0.7'))
    app.config['MILEAGE_DATA_PATH'] = os.environ.get('MILEAGE_DATA_PATH', DEFAULT_DATA_PATH)
    app.config['TOKEN_EXPIRES_IN'] = int(os.environ.get('TOKEN_EXPIRES_IN', SEVEN_DAYS))

    if test_config:
        app.config.update(test_config)

    if not app.config['SECRET_KEY']:
        raise ValueError("SECRET_KEY environment variable is required")

    CORS(app,
         resources={r"/*": {"origins": app.config['ALLOWED_ORIGINS']}},
         allow_headers=["Content-Type", "Authorization"],
         expose_headers=["Content-Disposition"],
         methods=["GET", "POST", "DELETE", "OPTIONS"]
    )

    db.init_app(app)
    migrate.init_app(app, db)

    app.extensions['distance_table'] = DistanceTable.from_json(app.config['MILEAGE_DATA_PATH'])
    app.extensions['trip_store'] = SQLTripStore(db)
    app.extensions['owner_locks'] = OwnerLocks()

    with app.app_context():
        db.create_all()

    @app.before_request
    def log_origin():
        origin = request.headers.get('Origin')
        if origin:
            logger.info(f"Request Origin: {origin}")

    @app.route('/')
    def index():
        return jsonify({"message": "Mileage Tracker API is running."})

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "Resource not found."}), 404

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(schools_bp, url_prefix='/schools')
    app.register_blueprint(trips_bp, url_prefix='/trips')

    return app


if __name__ == '__main__':
    create_app().run(host='0.0.0.0', port=int(os.environ.get('PORT', 4000)), debug=os.environ.get('FLASK_DEBUG') == '1')
