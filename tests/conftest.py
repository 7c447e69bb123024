"""
Pytest Configuration and Fixtures

Provides common fixtures for all tests including:
- Portal users for every role
- A mocked data service client
- API client wired to the mocked data service
"""

from typing import AsyncGenerator, Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_current_user, get_data_client
from campus_portal.api.main import app
from campus_portal.config import PortalSettings, get_settings
from campus_portal.core.models.users import User, UserRole


@pytest.fixture
def test_settings() -> PortalSettings:
    return PortalSettings(
        data_url="http://data.test/rest/v1",
        data_key="test-key",
        environment="test",
    )


@pytest.fixture
def student_user() -> User:
    return User(
        id="u-student",
        name="Arjun Mehta",
        email="b22100@students.iitmandi.ac.in",
        role=UserRole.STUDENT,
        cgpa=8.0,
    )


@pytest.fixture
def faculty_user() -> User:
    return User(
        id="u-faculty",
        name="Dr. A. Sharma",
        email="prof@iitmandi.ac.in",
        role=UserRole.FACULTY,
    )


@pytest.fixture
def authority_user() -> User:
    return User(
        id="u-authority",
        name="Dean of Students",
        email="dean@iitmandi.ac.in",
        role=UserRole.AUTHORITY,
    )


@pytest.fixture
def admin_user() -> User:
    return User(
        id="u-admin",
        name="Chief Warden",
        email="admin@iitmandi.ac.in",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def mock_data_client() -> AsyncMock:
    """Data service client with empty default responses"""
    client = AsyncMock(spec=DataServiceClient)
    client.select.return_value = []
    client.select_one.return_value = None
    client.count.return_value = 0
    client.insert.return_value = []
    client.update.return_value = []
    client.delete.return_value = None
    return client


@pytest.fixture
async def client(mock_data_client, test_settings) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create async HTTP client for API testing"""
    app.dependency_overrides[get_data_client] = lambda: mock_data_client
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def login_as() -> Callable[[User], None]:
    """Make the API treat every request as coming from the given user"""

    def _login(user: User):
        app.dependency_overrides[get_current_user] = lambda: user

    return _login
