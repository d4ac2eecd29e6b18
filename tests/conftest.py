"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from store import StudentStore


@pytest.fixture
def store():
    """A fresh, empty store per test"""
    return StudentStore()


@pytest.fixture
def client(store):
    """Test client wired to the per-test store"""
    return TestClient(create_app(store=store))


@pytest.fixture
def sample_student():
    """A valid creation payload"""
    return {"name": "Ann", "age": 20, "class": "10", "subject": "Math"}
