"""
Shared test fixtures for the Lufft codec tests.

Provides a fixed receipt time, a seeded random source, sample telegrams for
every variant, and environment isolation for SimulatorSettings tests.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-101)

TODO:
- None
"""

from __future__ import annotations

import random
from datetime import UTC, datetime

import pytest

# All SimulatorSettings environment variable names, used for cleanup.
_ALL_SIMULATOR_ENV_VARS = (
    "GATEWAY_BASE_URL",
    "STATION_NUMBERS",
    "TELEGRAM_VARIANT",
    "REQUEST_COUNT",
    "REQUEST_TIMEOUT_S",
)

# 2023-06-15 15:00 station time; the sample telegrams are stamped 14:30.
RECEIPT_TIME = datetime(2023, 6, 15, 7, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _clean_simulator_env(monkeypatch: pytest.MonkeyPatch, tmp_path: str) -> None:
    """Remove simulator env vars and isolate from .env files before each test."""
    for var in _ALL_SIMULATOR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def now() -> datetime:
    """Fixed receipt time 30 minutes after the sample telegrams."""
    return RECEIPT_TIME


@pytest.fixture()
def rng() -> random.Random:
    """Seeded random source for reproducible readings."""
    return random.Random(1234)


@pytest.fixture()
def telegram_23() -> str:
    """Full-health telegram: 23 tokens after the leading marker."""
    return (
        "0+31.5+78.2+1008.3+10.8+15.1+182+523.0+22.1+30.5+9+0"
        "+13.1+13.0+0.2+12.4+11.8+WX12+87+22.0+45.0+FW3+230615/143000+0"
    )


@pytest.fixture()
def telegram_24() -> str:
    """Same reading as telegram_23 with the filler token after the gust."""
    return (
        "0+31.5+78.2+1008.3+10.8+15.1+0+182+523.0+22.1+30.5+9+0"
        "+13.1+13.0+0.2+12.4+11.8+WX12+87+22.0+45.0+FW3+230615/143000+0"
    )


@pytest.fixture()
def telegram_19() -> str:
    """Reduced-health telegram with a '#'-suffixed battery voltage."""
    return (
        "0+29.4+81.0+1006.9+7.2+10.8+90+310.5+25.3+29.4+0+0"
        "+0.5+2.1+63+12.65#+12.1+F19A+2023:06:15:14:30:00+0"
    )


@pytest.fixture()
def telegram_20() -> str:
    """Reduced-health telegram in the 20-token shape."""
    return (
        "0+29.4+81.0+1006.9+7.2+10.8+0+90+310.5+25.3+29.4+0+0"
        "+63+12.65V+12.1+0.5+2.1+F20B+2023:06:15:14:30:00+0"
    )
