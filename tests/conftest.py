"""Setup items for the greeter tests."""

import pytest

from app import app as flask_app


@pytest.fixture()
def app():
    """Return the Flask app configured for testing."""
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app):
    """Return a test client bound to the app."""
    return app.test_client()
