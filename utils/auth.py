import jwt
import logging
from datetime import datetime, timedelta, timezone
from functools import wraps
from flask import current_app, g, jsonify, request

logger = logging.getLogger(__name__)


def generate_token(user, expires_in=None):
    if expires_in is None:
        expires_in = current_app.config["TOKEN_EXPIRES_IN"]
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user.id,
        "exp": now + timedelta(seconds=expires_in),
        "iat": now
    }

    token = jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")
    return token

def decode_token(token):
    try:
        payload = jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])
        return payload
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None

def login_required(view):
    """Reject requests without a valid bearer token and expose the caller's
    user id as ``g.user_id``."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            return jsonify({"error": "missing_token", "message": "No token provided."}), 401

        parts = auth_header.split(" ")
        payload = None
        if len(parts) == 2 and parts[0].lower() == "bearer":
            payload = decode_token(parts[1])
        if not payload or "user_id" not in payload:
            logger.warning(f"Rejected token for {request.path}")
            return jsonify({"error": "invalid_token", "message": "Invalid or expired token."}), 401

        g.user_id = payload["user_id"]
        return view(*args, **kwargs)
    return wrapped
