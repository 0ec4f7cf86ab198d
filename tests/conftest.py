"""
pytest configuration and fixtures for the car store test suite
"""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from database.car_repository import CarRepository
from services.cars_service import CarsService
from tests.fakes import FakeCollection


@pytest.fixture
def collection():
    """Empty in-memory cars collection"""
    return FakeCollection()


@pytest.fixture
def repository(collection):
    return CarRepository(collection)


@pytest.fixture
def cars_service(repository):
    """Service with a short deadline so timeout tests stay fast"""
    return CarsService(repository, timeout=0.5)


@pytest.fixture
def client(repository):
    """HTTP client against an app wired to the in-memory collection"""
    app = create_app(repository=repository, timeout=0.5)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def corolla():
    return {"make": "Toyota", "model": "Corolla", "year": 2020, "price": 19999.99}
