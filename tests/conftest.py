"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bitelogs_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def user(db):
    """Provide a persisted regular user."""
    from tests.factories import create_user  # noqa: PLC0415

    return create_user()


@pytest.fixture
def authenticated_client(user):
    """Provide a test client that sends a bearer token for ``user``."""
    from tests.factories import auth_header  # noqa: PLC0415

    return Client(headers=auth_header(user))
