"""
Token value parsers for Lufft telegrams.

Converts single ``+``-delimited tokens into optional numbers. A token that
fails to parse, or that carries the ``999.9`` "no reading" sentinel, becomes
``None``; absence is never represented as zero because 0.0 is a legitimate
humidity or rainfall reading.

The inverse renderers used by the encoder live here too so that rounding on
both sides of the wire is defined in one place.

CHANGELOG:
- 2026-10-19: Treat values beyond the float32 range as absent
- 2026-10-19: Reject non-finite literals (nan/inf) as absent
- 2026-10-19: Initial creation (STORY-102)

TODO:
- None
"""

from __future__ import annotations

import math
import re

MISSING_VALUE = 999.9
"""Sentinel literal emitted by the station when a sensor has no reading."""

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

FLOAT32_MAX = 3.4028234663852886e38
"""Largest finite single-precision value; wider readings are absent."""

# Plain decimal literals only: Python's float() also accepts underscores,
# surrounding whitespace, "nan" and "inf", none of which appear on the wire.
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero."""
    return math.copysign(math.floor(abs(value) * 100 + 0.5) / 100, value)


def parse_float(token: str, *, skip_sentinel: bool = False) -> float | None:
    """Parse *token* as a float rounded to 2 decimals.

    Args:
        token: Raw token text.
        skip_sentinel: When ``True`` a value of ``999.9`` is kept as a real
            reading. Only pressure does this.

    Returns:
        The rounded value, or ``None`` if the token is not a decimal literal,
        lies outside the single-precision range, or equals the sentinel.
    """
    if not _FLOAT_RE.fullmatch(token):
        return None

    value = float(token)
    if not math.isfinite(value) or abs(value) > FLOAT32_MAX:
        return None
    if not skip_sentinel and value == MISSING_VALUE:
        return None

    return round2(value)


def parse_float_scaled(
    token: str,
    *,
    factor: float,
    skip_sentinel: bool = False,
) -> float | None:
    """Parse *token* like :func:`parse_float`, then apply a unit factor.

    The product is re-rounded to 2 decimals.
    """
    value = parse_float(token, skip_sentinel=skip_sentinel)
    if value is None:
        return None
    return round2(value * factor)


def parse_int(token: str) -> int | None:
    """Parse *token* as a signed 32-bit base-10 integer, ``None`` on failure."""
    if not _INT_RE.fullmatch(token):
        return None

    value = int(token)
    if value < _INT32_MIN or value > _INT32_MAX:
        return None
    return value


def format_float(value: float | None) -> str:
    """Render an optional float as ``%.2f``; empty string when absent."""
    if value is None:
        return ""
    return f"{round2(value):.2f}"


def format_int(value: int | None) -> str:
    """Render an optional int; empty string when absent."""
    if value is None:
        return ""
    return str(value)
