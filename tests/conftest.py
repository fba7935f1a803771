"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from web_server import create_app


@pytest.fixture
def app() -> Flask:
    """Create the app wired with the real controllers."""
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    """Create a test client for the app."""
    with app.test_client() as test_client:
        yield test_client
