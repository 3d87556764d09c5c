"""
Shared test fixtures for gateway tests.

Provides a configured TestClient for FastAPI integration testing and sample
telegrams stamped relative to the real clock, since the webhook decodes with
the actual receipt time.

CHANGELOG:
- 2026-10-19: Initial creation with client and telegram fixtures (STORY-112)
"""

import random
from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from lufft.src.encoder import encode
from lufft.src.simulator import random_reading


@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set gateway environment variables to known test values."""
    monkeypatch.setenv("MAX_MESSAGE_LENGTH", "480")


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """Create a FastAPI TestClient for integration testing.

    Uses a context manager so the application lifespan (config loading) runs.

    Yields:
        TestClient: Configured test client for the FastAPI app.
    """
    from gateway.src.api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def fresh_telegram() -> str:
    """Variant-23 telegram stamped five minutes before the real clock."""
    reading = random_reading(datetime.now(tz=UTC) - timedelta(minutes=5), random.Random(11))
    return encode(reading, 23)


@pytest.fixture()
def stale_telegram() -> str:
    """Variant-24 telegram stamped 2023-06-15 14:30 station time."""
    return (
        "0+31.5+78.2+1008.3+10.8+15.1+0+182+523.0+22.1+30.5+9+0"
        "+13.1+13.0+0.2+12.4+11.8+WX12+87+22.0+45.0+FW3+230615/143000+0"
    )
