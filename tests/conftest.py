"""Pytest configuration for the item store tests."""
import pytest
from fastapi.testclient import TestClient

from itemstore.main import create_app
from itemstore.storage import ItemStore


@pytest.fixture
def store():
    """An empty store shared between the app and the test."""
    return ItemStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    """Get a TestClient for a freshly built app."""
    with TestClient(app) as test_client:
        yield test_client
