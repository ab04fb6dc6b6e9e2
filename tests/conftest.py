"""
Pytest fixtures for the validator tests.
"""

import pytest


@pytest.fixture
def client():
    """Flask test client for the /validate endpoint."""
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client
