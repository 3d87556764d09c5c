"""
Encoder that renders a LufftReading back into telegram text.

Walks the same token-slot table as the decoder, applying the inverse unit
factors, so ``decode(encode(reading, v))`` reproduces *reading* up to
2-decimal rounding. Used to build test fixtures and simulated SMS traffic.

CHANGELOG:
- 2026-10-19: Reject text fields that would alter the token count
- 2026-10-19: Initial creation (STORY-107)

TODO:
- None
"""

from __future__ import annotations

from lufft.src.decoder import DELIMITER
from lufft.src.layouts import LAYOUTS, Record, SlotKind, TokenSlot, Variant
from lufft.src.models import LufftReading
from lufft.src.timestamps import format_timestamp
from lufft.src.values import format_float, format_int

LEADING_MARKER = "0"

# Substrings the decoder treats as delimiters or gateway artifacts.
_RESERVED = (DELIMITER, ">", "%20")


def _encode_slot(slot: TokenSlot, reading: LufftReading, variant: Variant) -> str:
    """Render one slot of *variant* from *reading*."""
    kind = slot.kind

    if kind is SlotKind.LITERAL:
        return slot.literal
    if kind is SlotKind.TIMESTAMP:
        return format_timestamp(reading.observation.timestamp, variant.timestamp_style)

    record = reading.observation if slot.record is Record.OBSERVATION else reading.health
    value = getattr(record, slot.name)

    if kind is SlotKind.TEXT:
        if any(r in value for r in _RESERVED):
            raise ValueError(
                f"Field '{slot.name}' cannot be encoded: "
                f"{value!r} contains a reserved sequence"
            )
        return value
    if kind is SlotKind.INT:
        return format_int(value)
    if value is None:
        return ""
    if kind in (SlotKind.VOLTAGE_HASH, SlotKind.VOLTAGE_SUFFIX):
        return format_float(value) + "#"
    return format_float(value / slot.factor)


def encode(reading: LufftReading, variant: Variant | int) -> str:
    """Render *reading* as a telegram of the given *variant*.

    Args:
        reading: The observation/health pair to render.
        variant: Target layout; 19, 20, 23 or 24.

    Returns:
        The telegram text, including the leading sequence marker.

    Raises:
        ValueError: If *variant* is not a supported layout, or a text field
            contains the delimiter or a gateway artifact (``>``, ``%20``).
    """
    variant = Variant(variant)
    tokens = [LEADING_MARKER]
    tokens.extend(_encode_slot(slot, reading, variant) for slot in LAYOUTS[variant])
    return DELIMITER.join(tokens)
