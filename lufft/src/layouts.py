"""
Lufft telegram layouts -- single source of truth for token positions.

A telegram is a ``+``-delimited string. After the leading sequence marker is
discarded, the number of remaining tokens selects one of four layouts:

======= ============================================================
Variant Shape
======= ============================================================
19      obs(10) + sep + reduced health(6) + timestamp + marker
20      like 19 with a filler token after the wind gust
23      obs(10) + sep + full health(10) + timestamp + marker
24      like 23 with a filler token after the wind gust
======= ============================================================

Each layout is an explicit tuple of :class:`TokenSlot`, one per token, which
both the decoder and the encoder walk. The filler token of variants 20/24 is
a slot like any other, so decode and encode cannot disagree on where it is.

CHANGELOG:
- 2026-10-19: Replace index splicing with per-variant slot tables
- 2026-10-19: Initial creation (STORY-104)

TODO:
- None
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from lufft.src.timestamps import TimestampStyle

# ---------------------------------------------------------------------------
# Data definitions
# ---------------------------------------------------------------------------


class Variant(IntEnum):
    """Telegram format variant, valued by its token count."""

    V19 = 19
    V20 = 20
    V23 = 23
    V24 = 24

    @property
    def full_health(self) -> bool:
        """Whether the variant carries the full 10-field health block."""
        return self in (Variant.V23, Variant.V24)

    @property
    def timestamp_style(self) -> TimestampStyle:
        """Timestamp rendering the encoder uses for this variant."""
        return TimestampStyle.SLASH if self.full_health else TimestampStyle.COLON


class SlotKind(Enum):
    """How a token is decoded and rendered."""

    FLOAT = "float"
    INT = "int"
    TEXT = "text"
    VOLTAGE_HASH = "voltage_hash"  # "12.40#": value before the first '#'
    VOLTAGE_SUFFIX = "voltage_suffix"  # "12.40#": value minus the last char
    TIMESTAMP = "timestamp"
    LITERAL = "literal"  # separator, filler or sequence marker; never parsed


class Record(Enum):
    """Record a decoded slot value belongs to."""

    OBSERVATION = "observation"
    HEALTH = "health"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class TokenSlot:
    """Definition of a single telegram token.

    Attributes:
        name: Field name on :class:`~lufft.src.models.Observation` or
            :class:`~lufft.src.models.DeviceHealth`; a descriptive label for
            literal slots.
        kind: How the token is decoded and rendered.
        record: Which record the decoded value is assigned to.
        factor: Multiplicative unit conversion from wire to stored value.
            The encoder divides by it.
        skip_sentinel: Keep a ``999.9`` value instead of treating it as
            missing.
        literal: Text the encoder writes for :attr:`SlotKind.LITERAL` slots.
    """

    name: str
    kind: SlotKind
    record: Record = Record.NONE
    factor: float = 1.0
    skip_sentinel: bool = False
    literal: str = "0"


class InvalidTelegramError(ValueError):
    """Raised when a telegram's token count matches no known variant."""

    def __init__(self, n_tokens: int) -> None:
        self.n_tokens = n_tokens
        super().__init__(
            f"invalid string: expected 19, 20, 23 or 24 tokens, got {n_tokens}"
        )


# ---------------------------------------------------------------------------
# Slot helpers
# ---------------------------------------------------------------------------

KMH_TO_MS = 1.0 / 3.6
"""Wind speed factor: telegram km/h -> stored m/s."""

TIPS_TO_MM = 0.2 * 6.0
"""Rain factor: telegram tips per interval -> stored mm."""


def _obs(name: str, *, factor: float = 1.0, skip_sentinel: bool = False) -> TokenSlot:
    return TokenSlot(
        name=name,
        kind=SlotKind.FLOAT,
        record=Record.OBSERVATION,
        factor=factor,
        skip_sentinel=skip_sentinel,
    )


def _health(name: str, kind: SlotKind = SlotKind.FLOAT) -> TokenSlot:
    return TokenSlot(name=name, kind=kind, record=Record.HEALTH)


def _literal(name: str) -> TokenSlot:
    return TokenSlot(name=name, kind=SlotKind.LITERAL)


# ---------------------------------------------------------------------------
# Observation block (identical for every variant)
# ---------------------------------------------------------------------------

_WIND_BLOCK: tuple[TokenSlot, ...] = (
    _obs("temp"),
    _obs("rh"),
    _obs("pres", skip_sentinel=True),
    _obs("wspd", factor=KMH_TO_MS),
    _obs("wspdx", factor=KMH_TO_MS),
)

_REST_BLOCK: tuple[TokenSlot, ...] = (
    _obs("wdir"),
    _obs("srad"),
    _obs("td"),
    _obs("wchill"),
    _obs("rr", factor=TIPS_TO_MM),
)

_FILLER = _literal("filler")
_SEPARATOR = _literal("separator")
_TIMESTAMP = TokenSlot(name="timestamp", kind=SlotKind.TIMESTAMP)
_MARKER = _literal("sequence_marker")

# ---------------------------------------------------------------------------
# Health blocks
# ---------------------------------------------------------------------------

_FULL_HEALTH: tuple[TokenSlot, ...] = (
    _health("vb1"),
    _health("vb2"),
    _health("curr"),
    _health("bp1"),
    _health("bp2"),
    _health("cm", SlotKind.TEXT),
    _health("ss", SlotKind.INT),
    _health("temp_arq"),
    _health("rh_arq"),
    _health("fpm", SlotKind.TEXT),
)

_HEALTH_19: tuple[TokenSlot, ...] = (
    _health("temp_arq"),
    _health("rh_arq"),
    _health("ss", SlotKind.INT),
    _health("vb1", SlotKind.VOLTAGE_HASH),
    _health("bp1"),
    _health("fpm", SlotKind.TEXT),
)

_HEALTH_20: tuple[TokenSlot, ...] = (
    _health("ss", SlotKind.INT),
    _health("vb1", SlotKind.VOLTAGE_SUFFIX),
    _health("bp1"),
    _health("temp_arq"),
    _health("rh_arq"),
    _health("fpm", SlotKind.TEXT),
)


def _layout(health: tuple[TokenSlot, ...], *, filler: bool) -> tuple[TokenSlot, ...]:
    obs = _WIND_BLOCK + ((_FILLER,) if filler else ()) + _REST_BLOCK
    return obs + (_SEPARATOR,) + health + (_TIMESTAMP, _MARKER)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

LAYOUTS: dict[Variant, tuple[TokenSlot, ...]] = {
    Variant.V19: _layout(_HEALTH_19, filler=False),
    Variant.V20: _layout(_HEALTH_20, filler=True),
    Variant.V23: _layout(_FULL_HEALTH, filler=False),
    Variant.V24: _layout(_FULL_HEALTH, filler=True),
}
"""Token-slot table per variant; ``len(LAYOUTS[v]) == v``."""

OBSERVATION_FIELDS: tuple[str, ...] = (
    "temp",
    "rh",
    "pres",
    "wspd",
    "wspdx",
    "wdir",
    "srad",
    "td",
    "wchill",
    "rr",
)
"""Observation fields in declared order (used by the quality bitmask)."""


def health_fields(variant: Variant) -> tuple[str, ...]:
    """Names of the health fields carried by *variant*, in token order."""
    return tuple(s.name for s in LAYOUTS[variant] if s.record is Record.HEALTH)


def dispatch(n_tokens: int) -> Variant:
    """Select the variant for a telegram with *n_tokens* tokens.

    The count excludes the discarded leading sequence marker.

    Raises:
        InvalidTelegramError: If *n_tokens* is not 19, 20, 23 or 24.
    """
    try:
        return Variant(n_tokens)
    except ValueError:
        raise InvalidTelegramError(n_tokens) from None
