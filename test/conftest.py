"""
Test Configuration and Fixtures

This module provides:
- Throwaway SQLite database (via aiosqlite) per xdist worker
- Table reset and rate limiter reset around every integration test
- HTTP client and JWT cookie helpers for API tests

Architecture:
- Unit tests (@pytest.mark.unit): mocks only, never touch the database
- Integration tests: real repositories / HTTP app on the SQLite database
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings (DATABASE_URL, TEST_LOG_DIR, SECRET_KEY) are read at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'seating_area_test_{worker_id}.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['SECRET_KEY'] = 'test_secret_key'
    os.environ.pop('OTEL_EXPORTER_OTLP_ENDPOINT', None)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from typing import Any, Iterable, Mapping  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.service.seating.driving_adapter.http_controller.auth.jwt_auth import (  # noqa: E402
    JwtAuth,
)
from test.shared.utils import fetch_booking_tables, insert_bookings, reset_tables  # noqa: E402
from test.util_constant import ACTOR_ID, RESTAURANT_ID  # noqa: E402


# =============================================================================
# Pytest Hooks: every test that is not a unit test gets a clean database
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.add_marker(pytest.mark.integration)
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await reset_tables()
    container.seating_area_insert_rate_limiter().reset()
    yield
    container.seating_area_insert_rate_limiter().reset()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def login_as(client: TestClient) -> Callable[..., None]:
    """Put a JWT cookie for the given actor and per-restaurant capabilities on the client"""

    def _login(
        *,
        actor_id: str = ACTOR_ID,
        restaurants: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        token = JwtAuth().create_jwt_token(
            actor_id=actor_id,
            restaurants=restaurants if restaurants is not None else {RESTAURANT_ID: ['tables']},
        )
        client.cookies.set(settings.AUTH_COOKIE_NAME, token)

    return _login


@pytest.fixture
def seed_bookings(client: TestClient) -> Callable[[list[dict[str, Any]]], None]:
    """Insert booking rows on the client's event loop (sync API tests)"""

    def _seed(rows: list[dict[str, Any]]) -> None:
        client.portal.call(insert_bookings, rows)  # type: ignore[union-attr]

    return _seed


@pytest.fixture
def read_booking_tables(client: TestClient) -> Callable[[], dict[str, Any]]:
    def _read() -> dict[str, Any]:
        return client.portal.call(fetch_booking_tables)  # type: ignore[union-attr]

    return _read
