"""Bearer token decorator for API endpoints.

Validates the JWT, loads the user it was issued for and exposes it as
``g.current_user`` before hitting route handlers.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from backend.app.repositories import users_repo

logger = logging.getLogger(__name__)


def token_required(func: Callable[..., Any]) -> Callable[..., Any]:
    """Ensure the request carries a valid token for an existing user."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        verify_jwt_in_request()
        identity = get_jwt_identity()
        try:
            user = users_repo.find_by_id(identity) if identity else None
        except Exception:
            logger.exception("Unexpected error loading token user %s", identity)
            return jsonify({"error": "internal_server_error"}), 500
        if not user:
            logger.warning(
                "Token refers to unknown user",
                extra={"sub": identity, "endpoint": func.__name__},
            )
            return jsonify({"error": "token missing or invalid"}), 401
        g.current_user = user
        return func(*args, **kwargs)

    return wrapper
