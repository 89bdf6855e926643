"""Shared fixtures: a testing app with no MongoDB server behind it."""

from __future__ import annotations

from typing import Callable, Dict

import pytest
from bson import ObjectId
from flask import Flask
from flask_jwt_extended import create_access_token

from backend.app import create_app
from backend.app.config import TestingConfig

USER_ID = ObjectId("507f1f77bcf86cd799439011")


@pytest.fixture(name="app")
def fixture_app() -> Flask:
    return create_app(TestingConfig)


@pytest.fixture(name="client")
def fixture_client(app: Flask):
    return app.test_client()


@pytest.fixture(name="user")
def fixture_user() -> Dict:
    return {"_id": USER_ID, "username": "mluukkai", "name": "Matti Luukkainen", "blogs": []}


@pytest.fixture(name="auth_header")
def fixture_auth_header(app: Flask) -> Callable[..., Dict[str, str]]:
    def _auth_header(identity: str = str(USER_ID)) -> Dict[str, str]:
        with app.app_context():
            token = create_access_token(identity=identity)
        return {"Authorization": f"Bearer {token}"}

    return _auth_header
