"""
Philippine mobile number normalisation.

SMS gateways report sender numbers as ``09171234567``, ``9171234567``,
``639171234567`` or ``+639171234567``. Stations are keyed by the canonical
``63`` + 10-digit form.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-113)

TODO:
- None
"""

from __future__ import annotations

import re

_MOBILE_RE = re.compile(r"((\+?63)|0)?([1-9]\d{9})")


def parse_mobile_number(raw: str) -> str | None:
    """Extract the canonical ``63##########`` number from *raw*.

    Returns:
        The normalised number, or ``None`` if *raw* holds no 10-digit
        subscriber number.
    """
    match = _MOBILE_RE.search(raw)
    if match is None:
        return None
    return "63" + match.group(3)
