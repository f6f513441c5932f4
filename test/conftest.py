"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application import (settings read env at import time)
- A fresh sqlite database per test (aiosqlite for the app, pysqlite for seeding)
- FastAPI TestClient running the real lifespan

Architecture:
- Unit tests (test/**/unit/): no database, AsyncMock repositories
- Integration tests: real database file under tmp_path, dropped with the test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DEBUG'] = 'false'
    os.environ['BOOKING_TAX_RATE'] = '0.07'
    # Replaced per test by the database_url fixture
    default_db = Path(tempfile.gettempdir()) / 'cinema_booking_test.db'
    os.environ.setdefault('DATABASE_URL', f'sqlite+aiosqlite:///{default_db}')


_early_setup_test_environment()

from collections.abc import AsyncIterator, Iterator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy import Engine, create_engine  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from cinema_booking.main import app  # noqa: E402
from cinema_booking.platform.config.core_setting import settings  # noqa: E402
from cinema_booking.platform.database.orm_db_setting import (  # noqa: E402
    create_db_and_tables,
    dispose_engine,
    get_session_maker,
)


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture
def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the app at a database file owned by this test."""
    url = f'sqlite+aiosqlite:///{tmp_path / "booking.db"}'
    monkeypatch.setattr(settings, 'DATABASE_URL', url)
    return url


@pytest.fixture
def sync_engine(database_url: str) -> Iterator[Engine]:
    """Synchronous engine on the same file, for seeding from sync (BDD) steps."""
    engine = create_engine(database_url.replace('+aiosqlite', ''))
    yield engine
    engine.dispose()


@pytest_asyncio.fixture
async def database(database_url: str) -> AsyncIterator[str]:
    await create_db_and_tables()
    yield database_url
    await dispose_engine()


@pytest_asyncio.fixture
async def session(database: str) -> AsyncIterator[AsyncSession]:
    async with get_session_maker()() as db_session:
        yield db_session


# =============================================================================
# HTTP Fixtures
# =============================================================================
@pytest.fixture
def client(database_url: str) -> Iterator[TestClient]:
    """TestClient with lifespan (tables are created on startup)."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
