"""
Root conftest for the pytest test suite.

This file contains the fixtures shared across the entire test suite.

Key Fixtures:
- `app_for_testing`: Provides the FastAPI application instance.
- `client`: Provides a TestClient bound to the application.
- `admin_user`: A viewer with the ADMIN role.
- `standard_user`: A viewer with the USER role.
"""

from typing import Any, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tiny_reports.features.reports.schemas import User

# Import the app
from tiny_reports.main import app as actual_app


@pytest.fixture(scope="function")
def app_for_testing() -> Generator[FastAPI, Any, None]:
    """
    Provides the FastAPI application instance for testing.
    """
    yield actual_app


@pytest.fixture(scope="function")
def client(app_for_testing: FastAPI) -> Generator[TestClient, Any, None]:
    """
    Provides a starlette TestClient.
    """
    with TestClient(app_for_testing) as tc:
        yield tc


@pytest.fixture
def admin_user() -> User:
    return User(name="Admin", role="ADMIN")


@pytest.fixture
def standard_user() -> User:
    return User(name="Ana", role="USER")
