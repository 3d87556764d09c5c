"""
Pure decoder that turns a raw Lufft telegram into a LufftReading.

Strips SMS gateway artifacts, discards the leading sequence marker,
dispatches on the remaining token count, and walks the variant's token-slot
table to fill an Observation and a DeviceHealth. Individual bad tokens
degrade to ``None``; only an unknown token count fails the whole telegram.

This is a pure function: no I/O and no clock. The receipt time ``now`` is
passed in by the caller and used only for the timestamp plausibility check.

CHANGELOG:
- 2026-10-19: Score completeness via quality.assess
- 2026-10-19: Initial creation (STORY-106)

TODO:
- None
"""

from __future__ import annotations

import logging
from datetime import datetime

from lufft.src.layouts import LAYOUTS, Record, SlotKind, TokenSlot, Variant, dispatch
from lufft.src.models import DeviceHealth, LufftReading, Observation
from lufft.src.quality import assess
from lufft.src.timestamps import check_plausibility, parse_timestamp
from lufft.src.values import parse_float, parse_float_scaled, parse_int

logger = logging.getLogger(__name__)

DELIMITER = "+"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def clean_telegram(raw: str) -> str:
    """Remove gateway artifacts: ``>`` markers and URL-encoded spaces."""
    return raw.replace(">", "").replace("%20", DELIMITER).strip()


def split_tokens(telegram: str) -> list[str]:
    """Split a cleaned telegram and drop the leading sequence marker."""
    return telegram.split(DELIMITER)[1:]


def detect_variant(raw: str) -> Variant:
    """Classify a raw telegram by token count.

    Raises:
        InvalidTelegramError: If the token count is not 19, 20, 23 or 24.
    """
    return dispatch(len(split_tokens(clean_telegram(raw))))


def _decode_slot(slot: TokenSlot, token: str) -> float | int | str | None:
    """Decode one token according to its slot definition."""
    kind = slot.kind

    if kind is SlotKind.FLOAT:
        if slot.factor != 1.0:
            return parse_float_scaled(
                token, factor=slot.factor, skip_sentinel=slot.skip_sentinel
            )
        return parse_float(token, skip_sentinel=slot.skip_sentinel)
    if kind is SlotKind.INT:
        return parse_int(token)
    if kind is SlotKind.TEXT:
        return token
    if kind is SlotKind.VOLTAGE_HASH:
        return parse_float(token.split("#", 1)[0])
    if kind is SlotKind.VOLTAGE_SUFFIX:
        return parse_float(token[:-1])

    msg = f"Slot '{slot.name}': {kind.value} slots carry no field value"
    raise ValueError(msg)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def decode(raw: str, *, now: datetime) -> LufftReading:
    """Decode a Lufft telegram into an (observation, health) pair.

    Args:
        raw: Telegram text as received from the SMS gateway.
        now: Receipt time (timezone-aware), used as the reference for the
            timestamp plausibility window and as the fallback timestamp.

    Returns:
        A :class:`LufftReading`.

    Raises:
        InvalidTelegramError: If the token count is not 19, 20, 23 or 24.
    """
    message = clean_telegram(raw)
    tokens = split_tokens(message)

    try:
        variant = dispatch(len(tokens))
    except ValueError:
        logger.warning("Rejected telegram with %d tokens: %r", len(tokens), message)
        raise

    obs_fields: dict[str, float | None] = {}
    health_fields: dict[str, float | int | str | None] = {}
    ts_token = ""

    for slot, token in zip(LAYOUTS[variant], tokens, strict=True):
        if slot.kind is SlotKind.TIMESTAMP:
            ts_token = token
        elif slot.record is Record.OBSERVATION:
            obs_fields[slot.name] = _decode_slot(slot, token)  # type: ignore[assignment]
        elif slot.record is Record.HEALTH:
            health_fields[slot.name] = _decode_slot(slot, token)

    parsed_ts = parse_timestamp(ts_token)
    if parsed_ts is None:
        logger.warning("Unparseable telegram timestamp %r, using receipt time", ts_token)
    check = check_plausibility(parsed_ts, now)

    observation = Observation(timestamp=check.timestamp, **obs_fields)
    quality = assess(observation)

    health = DeviceHealth(
        timestamp=check.timestamp,
        minutes_difference=check.minutes_difference,
        error_msg=check.error_msg,
        message=message,
        data_count=quality.data_count,
        data_status=quality.data_status,
        **health_fields,
    )

    logger.debug(
        "Decoded V%d telegram: data_status=%s", variant.value, quality.data_status
    )
    return LufftReading(observation=observation, health=health)
