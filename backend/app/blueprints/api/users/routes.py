"""Users API blueprint: registration and listing."""
from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from backend.app.extensions import limiter
from backend.app.services import users_service as svc
from backend.app.services.users_service import UserServiceError

users_bp = Blueprint("users", __name__)
logger = logging.getLogger(__name__)


def _invalid_body_response():
    return jsonify({"error": "validation_failed", "message": "request body must be a JSON object"}), 400


@users_bp.route("", methods=["GET"])
def list_users():
    try:
        return jsonify(svc.list_users()), 200
    except Exception:
        logger.exception("Unexpected error listing users")
        return jsonify({"error": "internal_server_error"}), 500


@users_bp.route("", methods=["POST"])
@limiter.limit("5 per hour")
def register():
    """Register a new user (hashes password)."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _invalid_body_response()
    try:
        return jsonify(svc.create_user(data)), 201
    except UserServiceError as error:
        body = {"error": error.code, "message": error.message}
        if error.errors:
            body["errors"] = error.errors
        return jsonify(body), error.status
    except Exception:
        logger.exception("Unexpected error registering user")
        return jsonify({"error": "internal_server_error"}), 500
