"""
conftest.py - Test configuration and fixtures

Purpose:
  - Build the app with TestingConfig
  - Provide a Flask test client
  - Provide a helper that fetches a page and parses it with BeautifulSoup
"""

import pytest
from bs4 import BeautifulSoup

from app import create_app


@pytest.fixture
def app():
    """Flask app configured for tests."""
    return create_app('testing')


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def get_page(client):
    """
    Fetch a path and parse the HTML.
    Usage in tests:
        resp, soup = get_page("/")
    """

    def _get(path):
        resp = client.get(path)
        return resp, BeautifulSoup(resp.data, "html.parser")

    return _get


@pytest.fixture
def request_ctx(app):
    """Push a request context so render helpers and url_for work."""
    with app.test_request_context("/"):
        yield
