"""Blogs API blueprint.

Listing and reading are public; creating and deleting require a bearer
token. Validation and persistence live in the service layer.
"""

from __future__ import annotations

import logging

from flask import Blueprint, g, jsonify, request

from backend.app.middleware.token_required import token_required
from backend.app.services import blogs_service as svc
from backend.app.services.blogs_service import BlogServiceError

blogs_bp = Blueprint("blogs", __name__)
logger = logging.getLogger(__name__)


def _service_error_response(error: BlogServiceError):
    return jsonify({"error": error.code, "message": error.message}), error.status


def _invalid_body_response():
    return jsonify({"error": "validation_failed", "message": "request body must be a JSON object"}), 400


@blogs_bp.route("", methods=["GET"])
def list_blogs():
    try:
        return jsonify(svc.list_blogs()), 200
    except Exception:
        logger.exception("Unexpected error listing blogs")
        return jsonify({"error": "internal_server_error"}), 500


@blogs_bp.route("/<blog_id>", methods=["GET"])
def get_blog(blog_id: str):
    try:
        return jsonify(svc.get_blog(blog_id)), 200
    except BlogServiceError as error:
        return _service_error_response(error)
    except Exception:
        logger.exception("Unexpected error retrieving blog %s", blog_id)
        return jsonify({"error": "internal_server_error"}), 500


@blogs_bp.route("", methods=["POST"])
@token_required
def create_blog():
    """Create a blog owned by the token's user."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _invalid_body_response()
    try:
        return jsonify(svc.create_blog(g.current_user, data)), 201
    except BlogServiceError as error:
        return _service_error_response(error)
    except Exception:
        logger.exception("Unexpected error creating blog")
        return jsonify({"error": "internal_server_error"}), 500


@blogs_bp.route("/<blog_id>", methods=["DELETE"])
@token_required
def delete_blog(blog_id: str):
    """Delete a blog; only its creator may do so."""
    try:
        svc.delete_blog(g.current_user["_id"], blog_id)
        return "", 204
    except BlogServiceError as error:
        return _service_error_response(error)
    except Exception:
        logger.exception("Unexpected error deleting blog %s", blog_id)
        return jsonify({"error": "internal_server_error"}), 500


@blogs_bp.route("/<blog_id>", methods=["PUT"])
def update_blog(blog_id: str):
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _invalid_body_response()
    try:
        return jsonify(svc.update_blog(blog_id, data)), 200
    except BlogServiceError as error:
        return _service_error_response(error)
    except Exception:
        logger.exception("Unexpected error updating blog %s", blog_id)
        return jsonify({"error": "internal_server_error"}), 500
