"""Blog statistics endpoint."""
import logging

from flask import Blueprint, jsonify

from backend.app.services import blogs_service

stats_bp = Blueprint('stats', __name__)
logger = logging.getLogger(__name__)


@stats_bp.route('', methods=['GET'])
def get_stats():
    """Total likes, favorite blog and top authors across all blogs.

    Aggregates with no data (no blogs stored) are returned as null.
    """
    try:
        return jsonify(blogs_service.blog_statistics()), 200
    except Exception:
        logger.exception("Unexpected error computing blog statistics")
        return jsonify({"error": "internal_server_error"}), 500
