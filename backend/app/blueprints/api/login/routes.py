"""Login blueprint: exchanges username and password for a JWT."""
from flask import Blueprint, request, jsonify, current_app
import logging
from flask_jwt_extended import create_access_token

from backend.app.extensions import limiter
from backend.app.services import users_service

logger = logging.getLogger(__name__)

login_bp = Blueprint('login', __name__)


@login_bp.route('', methods=['POST'])
@limiter.limit("10 per minute")
def login():
    """Authenticate user and return an access token."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        username = data.get('username')
        password = data.get('password')

        user = None
        if isinstance(username, str) and isinstance(password, str):
            user = users_service.authenticate(username, password)
        if not user:
            if current_app.config.get('DEBUG'):
                logger.info(f"[DEV] Login failed for '{username}'")
            return jsonify({"error": "invalid username or password"}), 401

        token = create_access_token(
            identity=str(user['_id']),
            additional_claims={"username": user.get('username')},
        )
        return jsonify({
            "token": token,
            "username": user.get('username'),
            "name": user.get('name'),
        }), 200

    except Exception as e:
        logger.error(f"Login error: {str(e)}")
        return jsonify({"error": "internal_server_error"}), 500
