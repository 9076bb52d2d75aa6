from flask import Blueprint, request, jsonify
from sqlalchemy.exc import IntegrityError
from database.db import db
from models.user import User
from utils.auth import generate_token
import logging

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/register', methods=['POST'])
def register():
    data = request.get_json(silent=True) or {}
    email = (data.get('email') or '').strip()
    password = data.get('password')
    if not email or not password:
        return jsonify({'error': 'missing_credentials', 'message': 'Email and password required.'}), 400
    if User.query.filter_by(email=email).first():
        return jsonify({'error': 'email_taken', 'message': 'Email already registered.'}), 400

    user = User(email=email)
    user.set_password(password)
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'email_taken', 'message': 'Email already registered.'}), 400
    logger.info(f"Registered user {user.id}")
    return jsonify({'message': 'User registered successfully.', 'user_id': user.id}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    email = (data.get('email') or '').strip()
    password = data.get('password')
    if not email or not password:
        return jsonify({'error': 'missing_credentials', 'message': 'Email and password required.'}), 400
    user = User.query.filter_by(email=email).first()
    if user and user.check_password(password):
        return jsonify({'token': generate_token(user), 'user_id': user.id}), 200
    logger.warning(f"Failed login for {email}")
    return jsonify({'error': 'invalid_credentials', 'message': 'Invalid credentials.'}), 401
