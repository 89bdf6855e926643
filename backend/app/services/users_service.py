"""User registration, listing and credential checks."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import bcrypt
from flask import current_app
from pymongo.errors import DuplicateKeyError

from backend.app.repositories import blogs_repo, users_repo

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    def __init__(self, code: str, message: str, status: int = 400, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.errors = errors or {}


def _format_blog_summary(blog: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'id': str(blog['_id']),
        'title': blog.get('title'),
        'author': blog.get('author'),
        'url': blog.get('url'),
        'likes': blog.get('likes', 0),
    }


def format_user(user: Dict[str, Any], blogs: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """Serialize a user document without its password hash.

    When ``blogs`` is given the blog ids are replaced by blog summaries.
    """
    if blogs is not None:
        user_blogs: List[Any] = [_format_blog_summary(b) for b in blogs]
    else:
        user_blogs = [str(b) for b in user.get('blogs', [])]
    return {
        'id': str(user['_id']),
        'username': user.get('username'),
        'name': user.get('name'),
        'adult': user.get('adult', True),
        'blogs': user_blogs,
    }


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def check_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))


def list_users() -> List[Dict[str, Any]]:
    users = users_repo.find_all()
    blog_ids = [bid for u in users for bid in u.get('blogs', [])]
    blogs_by_id = {b['_id']: b for b in blogs_repo.find_by_ids(blog_ids)}
    result = []
    for user in users:
        owned = [blogs_by_id[bid] for bid in user.get('blogs', []) if bid in blogs_by_id]
        result.append(format_user(user, owned))
    return result


def create_user(payload: Dict[str, Any]) -> Dict[str, Any]:
    username = payload.get('username') or ''
    password = payload.get('password') or ''
    name = payload.get('name')
    adult = payload.get('adult')
    if adult is None:
        adult = True

    username_min = current_app.config.get('USERNAME_MIN_LENGTH', 3)
    password_min = current_app.config.get('PASSWORD_MIN_LENGTH', 3)

    errors: Dict[str, str] = {}
    if not isinstance(username, str) or len(username) < username_min:
        errors['username'] = f'username must be at least {username_min} characters'
    if not isinstance(password, str) or len(password) < password_min:
        errors['password'] = f'password must be at least {password_min} characters'
    if not isinstance(adult, bool):
        errors['adult'] = 'adult must be a boolean'
    if errors:
        raise UserServiceError('validation_failed', 'invalid user data', 400, errors)

    if users_repo.find_by_username(username):
        raise UserServiceError('conflict', 'username must be unique', 409, {'username': 'Username already exists'})

    user_doc = {
        'username': username,
        'name': name,
        'adult': adult,
        'passwordHash': hash_password(password),
        'blogs': [],
        'createdAt': datetime.now(timezone.utc),
    }
    try:
        user_doc['_id'] = users_repo.create_user(user_doc)
    except DuplicateKeyError:
        raise UserServiceError('conflict', 'username must be unique', 409, {'username': 'Username already exists'})

    logger.info("User %s registered", username)
    return format_user(user_doc)


def authenticate(username: str, password: str) -> Optional[Dict[str, Any]]:
    """Return the user document when the credentials match, else None."""
    if not isinstance(username, str) or not isinstance(password, str):
        return None
    if not username or not password:
        return None
    user = users_repo.find_by_username(username)
    if not user or not check_password(password, user.get('passwordHash')):
        return None
    return user
