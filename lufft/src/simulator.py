"""
Random Lufft readings for fixtures and simulated SMS traffic.

Value ranges follow what deployed stations report in practice. Every value is
pre-rounded to 2 decimals so a reading survives an encode/decode cycle.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-108)

TODO:
- None
"""

from __future__ import annotations

import random
import string
from datetime import datetime

from lufft.src.models import DeviceHealth, LufftReading, Observation
from lufft.src.timestamps import STATION_TZ

OBSERVATION_RANGES: dict[str, tuple[float, float]] = {
    "temp": (20.0, 37.0),
    "rh": (0.0, 100.0),
    "pres": (990.0, 1100.0),
    "wspd": (20.0, 35.0),
    "wspdx": (35.0, 50.0),
    "wdir": (0.0, 359.0),
    "srad": (0.0, 990.0),
    "td": (15.0, 40.0),
    "wchill": (20.0, 35.0),
    "rr": (0.0, 100.0),
}

HEALTH_RANGES: dict[str, tuple[float, float]] = {
    "vb1": (0.0, 20.0),
    "vb2": (0.0, 20.0),
    "curr": (0.0, 1.0),
    "bp1": (0.0, 30.0),
    "bp2": (0.0, 30.0),
    "temp_arq": (20.0, 35.0),
    "rh_arq": (0.0, 100.0),
}


def _code(rng: random.Random, length: int = 6) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))


def random_reading(now: datetime, rng: random.Random | None = None) -> LufftReading:
    """Build a plausible random reading stamped at *now*.

    Args:
        now: Timestamp for the reading; converted to station time and
            truncated to whole seconds (the wire resolution).
        rng: Random source, for reproducible fixtures.
    """
    rng = rng or random.Random()
    ts = now.astimezone(STATION_TZ).replace(microsecond=0)

    obs = {k: round(rng.uniform(lo, hi), 2) for k, (lo, hi) in OBSERVATION_RANGES.items()}
    health = {k: round(rng.uniform(lo, hi), 2) for k, (lo, hi) in HEALTH_RANGES.items()}

    return LufftReading(
        observation=Observation(timestamp=ts, **obs),
        health=DeviceHealth(
            timestamp=ts,
            cm=_code(rng),
            fpm=_code(rng),
            ss=rng.randint(0, 100),
            **health,
        ),
    )
