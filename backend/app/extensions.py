"""Flask extensions initialization (Limiter, JWT) and database wiring.

Includes JSON error responses for missing, invalid and expired tokens.
"""
from flask import jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_jwt_extended import JWTManager
from . import db

# Initialize Flask extensions
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per day", "50 per hour"],
    headers_enabled=True,
)
jwt = JWTManager()


def _token_error():
    return jsonify({"error": "token missing or invalid"}), 401


def init_extensions(app):
    """Initialize Flask extensions with app context.

    Args:
        app: Flask application instance
    """
    limiter.init_app(app)
    jwt.init_app(app)

    @jwt.unauthorized_loader
    def missing_token_callback(reason):
        app.logger.debug("Rejected request without token: %s", reason)
        return _token_error()

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        app.logger.debug("Rejected invalid token: %s", reason)
        return _token_error()

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return _token_error()

    db.init_app(app)
