"""
Completeness scoring for decoded observations.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-105)

TODO:
- None
"""

from __future__ import annotations

from dataclasses import dataclass

from lufft.src.layouts import OBSERVATION_FIELDS
from lufft.src.models import Observation


@dataclass(frozen=True, slots=True)
class Quality:
    """Completeness of one observation.

    Attributes:
        data_count: Number of observation fields present.
        data_status: ``'1'``/``'0'`` per field in ``OBSERVATION_FIELDS`` order.
    """

    data_count: int
    data_status: str


def assess(observation: Observation) -> Quality:
    """Count present fields and build the presence bitmask."""
    flags = [getattr(observation, name) is not None for name in OBSERVATION_FIELDS]
    return Quality(
        data_count=sum(flags),
        data_status="".join("1" if present else "0" for present in flags),
    )
