"""Pytest fixtures for OfficeDesk API tests."""

from collections.abc import AsyncGenerator, Callable, Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from officedesk.api.limiter import limiter
from officedesk.app import app
from officedesk.database.session import get_db
from officedesk.modules.auth.auth import AuthenticatedPrincipal, get_current_principal


@pytest.fixture(autouse=True)
def reset_rate_limits() -> Iterator[None]:
    """Start every test with empty rate-limit counters."""
    limiter.reset()
    yield


@pytest.fixture
def mock_db() -> AsyncMock:
    db = AsyncMock()
    db.add = MagicMock()
    return db


@pytest.fixture
def client(mock_db: AsyncMock) -> Iterator[TestClient]:
    """TestClient wired to the real app with a mocked DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncMock, None]:
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login_as() -> Callable[[AuthenticatedPrincipal], None]:
    """Make every request in the test resolve to the given principal."""

    def _login(principal: AuthenticatedPrincipal) -> None:
        async def override_get_current_principal() -> AuthenticatedPrincipal:
            return principal

        app.dependency_overrides[get_current_principal] = override_get_current_principal

    return _login
