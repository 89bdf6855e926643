"""Configuration settings and environment variables.

This module loads values from environment variables (including a .env file)
and provides small helpers to safely parse integers and booleans while
stripping inline comments. This avoids crashes when a .env value contains
an inline comment like:

    JWT_ACCESS_TOKEN_HOURS=1 # tokens live for an hour

The helpers fall back to defaults and emit warnings when parsing fails.
"""

import logging
from datetime import timedelta
from typing import Optional
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_logger = logging.getLogger(__name__)


def _strip_inline_comment(val: str) -> str:
    """Strip an inline comment from a string and trim whitespace/quotes.

    Example: "1 # one hour" -> "1"
    """
    if val is None:
        return ''
    val = val.split('#', 1)[0]
    val = val.strip()
    if (val.startswith('"') and val.endswith('"')) or (
        val.startswith("'") and val.endswith("'")
    ):
        val = val[1:-1]
    return val


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    stripped = _strip_inline_comment(raw)
    return stripped if stripped != '' else default


def _get_int_env(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except (ValueError, TypeError):
        _logger.warning("Invalid integer for %s: %r, falling back to %s", name, raw, default)
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = _get_env(name)
    if raw is None:
        return default
    return raw.lower() in ['true', '1', 'on', 'yes']


class Config:
    """Base configuration class with default settings."""

    # Flask settings
    SECRET_KEY = _get_env('SECRET_KEY') or 'dev-secret-key-change-in-production'
    # JWT settings
    JWT_SECRET_KEY = _get_env('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=_get_int_env('JWT_ACCESS_TOKEN_HOURS', 1))

    # MongoDB settings
    MONGO_URI = _get_env('MONGO_URI') or 'mongodb://localhost:27017/'
    MONGO_DB = _get_env('MONGO_DB') or 'bloglist'

    # Rate limiting
    RATELIMIT_ENABLED = _get_bool_env('RATELIMIT_ENABLED', True)
    RATELIMIT_STORAGE_URI = _get_env('RATELIMIT_STORAGE_URI') or 'memory://'

    # Registration rules
    USERNAME_MIN_LENGTH = _get_int_env('USERNAME_MIN_LENGTH', 3)
    PASSWORD_MIN_LENGTH = _get_int_env('PASSWORD_MIN_LENGTH', 3)


class DevelopmentConfig(Config):
    """Development configuration with debug mode enabled."""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration with security settings."""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration with test database."""
    TESTING = True
    MONGO_DB = 'bloglist_test'
    JWT_SECRET_KEY = 'test-secret-key-long-enough-for-hs256'
    RATELIMIT_ENABLED = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
