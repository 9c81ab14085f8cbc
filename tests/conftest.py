"""
Shared pytest fixtures for Finance Tracker API tests.
"""

import pytest
import os
import sys

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config  # noqa: E402
from models import db  # noqa: E402


class TestConfig(Config):
    """Test configuration backed by in-memory SQLite instead of MySQL."""
    SECRET_KEY = 'test-secret-key-for-testing-only'
    JWT_SECRET = 'test-jwt-secret-for-testing-only'
    JWT_EXPIRES_IN = 3600
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ENFORCE_AVAILABLE_FUNDS = True


@pytest.fixture
def app():
    """Create application for testing with fresh tables."""
    from app import create_app
    application = create_app(config_class=TestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


def register_user(client, name='Test User', email='test.user@mail.com', password='secret123'):
    """Helper to register a user through the API."""
    return client.post('/auth/register', json={
        'name': name,
        'email': email,
        'password': password,
    })


def login_headers(client, email='test.user@mail.com', password='secret123', name='Test User'):
    """Helper to register (if needed) and log in, returning bearer headers."""
    register_user(client, name=name, email=email, password=password)
    response = client.post('/auth/login', json={'email': email, 'password': password})
    assert response.status_code == 200, response.get_json()
    return {'Authorization': f"Bearer {response.get_json()['accessToken']}"}


@pytest.fixture
def auth_headers(client):
    """Bearer headers for a logged-in test user."""
    return login_headers(client)


@pytest.fixture
def other_headers(client):
    """Bearer headers for a second, unrelated user."""
    return login_headers(client, email='other.user@mail.com', name='Other User')
