"""
Telegram timestamp parsing, rendering and plausibility checking.

Stations stamp telegrams in Philippine local time (UTC+8) using one of two
literal encodings:

- separator form ``YYYY-MM-DDTHH:MM:SS`` read by fixed character positions,
  so the colon-joined ``YYYY:MM:DD:HH:MM:SS`` written by newer firmware
  parses the same way (a 17-character colon form with a 2-digit year is
  accepted as well);
- slash form ``YYMMDD/HHMMSS`` (13 characters) or ``YYYYMMDD/HHMMSS``.

Station clocks drift, so a parsed timestamp is checked against the receipt
time (``now``, always injected by the caller) before it reaches storage.
Rejections are reported in ``error_msg`` as ``"timestamp is N minutes behind"``
for a stale clock (more than 1 day old) and ``"... ahead"`` for a clock set
more than 90 days into the future. Older gateway builds used the opposite
words for the same two cases; consumers matching on the text must use these.

CHANGELOG:
- 2026-10-19: Document the behind/ahead wording of rejection messages
- 2026-10-19: Accept 2-digit-year colon form emitted by older loggers
- 2026-10-19: Initial creation (STORY-103)

TODO:
- None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

logger = logging.getLogger(__name__)

STATION_TZ = timezone(timedelta(hours=8))
"""Fixed offset every telegram timestamp is interpreted in."""

MIN_MINUTES_DIFF = -90 * 24 * 60
"""Lower bound of ``now - ts`` in minutes: telegram 90 days in the future."""

MAX_MINUTES_DIFF = 1 * 24 * 60
"""Upper bound of ``now - ts`` in minutes: telegram 1 day in the past."""


class TimestampStyle(Enum):
    """Wire rendering used by the encoder."""

    COLON = "colon"  # YYYY:MM:DD:HH:MM:SS
    SLASH = "slash"  # YYYYMMDD/HHMMSS


@dataclass(frozen=True, slots=True)
class TimestampCheck:
    """Outcome of the plausibility check.

    Attributes:
        timestamp: Timestamp to store (the parsed one, or ``now``).
        minutes_difference: ``now - parsed`` in whole minutes, truncated
            toward zero. 0 when the telegram had no usable timestamp.
        error_msg: Description of the violation, empty when plausible.
    """

    timestamp: datetime
    minutes_difference: int
    error_msg: str


def _build(year: str, month: str, day: str, hour: str, minute: str, second: str) -> datetime | None:
    parts = (year, month, day, hour, minute, second)
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            tzinfo=STATION_TZ,
        )
    except ValueError:
        return None


def parse_timestamp(token: str) -> datetime | None:
    """Parse a telegram timestamp token into an aware datetime (UTC+8).

    Returns:
        The parsed instant, or ``None`` when the token matches none of the
        known encodings.
    """
    s = token.strip()

    if "/" not in s:
        if len(s) == 17:
            return _build("20" + s[0:2], s[3:5], s[6:8], s[9:11], s[12:14], s[15:17])
        if len(s) < 19:
            return None
        return _build(s[0:4], s[5:7], s[8:10], s[11:13], s[14:16], s[17:19])

    if len(s) == 13:
        if s[6] != "/":
            return None
        return _build("20" + s[0:2], s[2:4], s[4:6], s[7:9], s[9:11], s[11:13])

    if len(s) != 15 or s[8] != "/":
        return None
    return _build(s[0:4], s[4:6], s[6:8], s[9:11], s[11:13], s[13:15])


def format_timestamp(ts: datetime, style: TimestampStyle) -> str:
    """Render *ts* in station local time using the wire *style*."""
    local = ts.astimezone(STATION_TZ)
    if style is TimestampStyle.SLASH:
        return local.strftime("%Y%m%d/%H%M%S")
    return local.strftime("%Y:%m:%d:%H:%M:%S")


def check_plausibility(timestamp: datetime | None, now: datetime) -> TimestampCheck:
    """Validate a parsed telegram timestamp against the receipt time.

    Args:
        timestamp: Parsed telegram timestamp, or ``None`` if unparseable.
        now: Receipt time. Must be timezone-aware.

    Returns:
        A :class:`TimestampCheck`. Timestamps more than 1 day behind or more
        than 90 days ahead of *now* are replaced by *now* and annotated.

    Raises:
        ValueError: If *now* is naive.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    if timestamp is None:
        return TimestampCheck(timestamp=now, minutes_difference=0, error_msg="")

    minutes = (now - timestamp).total_seconds() / 60
    error_msg = ""

    if minutes < MIN_MINUTES_DIFF:
        error_msg = f"timestamp is {abs(minutes):f} minutes ahead"
    elif minutes > MAX_MINUTES_DIFF:
        error_msg = f"timestamp is {minutes:f} minutes behind"

    if error_msg:
        logger.warning(
            "Implausible telegram timestamp %s (receipt %s): %s",
            timestamp.isoformat(),
            now.isoformat(),
            error_msg,
        )
        timestamp = now

    return TimestampCheck(
        timestamp=timestamp,
        minutes_difference=int(minutes),
        error_msg=error_msg,
    )
