"""
Tests for token value parsers and renderers.

Verifies sentinel handling, the pressure exemption, unit factors, rounding,
and that malformed tokens degrade to None instead of raising.

CHANGELOG:
- 2026-10-19: Cover the float32 range limit
- 2026-10-19: Initial creation (STORY-102)

TODO:
- None
"""

from __future__ import annotations

import pytest
from lufft.src.layouts import KMH_TO_MS, TIPS_TO_MM
from lufft.src.values import (
    MISSING_VALUE,
    format_float,
    format_int,
    parse_float,
    parse_float_scaled,
    parse_int,
    round2,
)


class TestParseFloat:
    """parse_float: decimal literal -> optional rounded float."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("31.5", 31.5),
            ("-4.25", -4.25),
            ("0", 0.0),
            ("0.0", 0.0),
            ("12.346", 12.35),
            ("1e2", 100.0),
            (".5", 0.5),
        ],
    )
    def test_valid_tokens(self, token: str, expected: float) -> None:
        assert parse_float(token) == pytest.approx(expected)

    @pytest.mark.parametrize("token", ["", "abc", "12.4#", "1_000", " 1.0", "nan", "inf"])
    def test_malformed_tokens_are_absent(self, token: str) -> None:
        assert parse_float(token) is None

    def test_zero_is_present_not_absent(self) -> None:
        """0.0 is a real humidity/rain reading and must not become None."""
        value = parse_float("0.0")
        assert value is not None
        assert value == 0.0

    def test_sentinel_is_absent(self) -> None:
        assert parse_float("999.9") is None
        assert parse_float("999.90") is None

    def test_sentinel_kept_when_check_skipped(self) -> None:
        assert parse_float("999.9", skip_sentinel=True) == pytest.approx(MISSING_VALUE)

    @pytest.mark.parametrize("token", ["1e40", "-1e40", "3.5e38"])
    def test_beyond_float32_range_is_absent(self, token: str) -> None:
        assert parse_float(token) is None

    def test_float32_max_is_present(self) -> None:
        assert parse_float("3.4e38") == pytest.approx(3.4e38)

    def test_near_sentinel_is_present(self) -> None:
        assert parse_float("999.8") == pytest.approx(999.8)


class TestParseFloatScaled:
    """parse_float_scaled: unit conversion after parsing."""

    def test_wind_36_kmh_is_10_ms(self) -> None:
        assert parse_float_scaled("36", factor=KMH_TO_MS) == pytest.approx(10.0)

    def test_rain_factor(self) -> None:
        assert parse_float_scaled("6", factor=TIPS_TO_MM) == pytest.approx(7.2)

    def test_result_is_rounded(self) -> None:
        assert parse_float_scaled("15.1", factor=KMH_TO_MS) == pytest.approx(4.19)

    def test_sentinel_is_absent_before_scaling(self) -> None:
        assert parse_float_scaled("999.9", factor=KMH_TO_MS) is None

    def test_bad_token_is_absent(self) -> None:
        assert parse_float_scaled("x", factor=TIPS_TO_MM) is None


class TestParseInt:
    """parse_int: signed 32-bit integer, no sentinel."""

    @pytest.mark.parametrize(("token", "expected"), [("87", 87), ("-3", -3), ("+5", 5), ("0", 0)])
    def test_valid(self, token: str, expected: int) -> None:
        assert parse_int(token) == expected

    @pytest.mark.parametrize("token", ["", "8.7", "x1", " 1", "2147483648"])
    def test_invalid(self, token: str) -> None:
        assert parse_int(token) is None

    def test_no_sentinel_for_ints(self) -> None:
        assert parse_int("999") == 999


class TestRendering:
    """Inverse renderers used by the encoder."""

    def test_round2_halves_away_from_zero(self) -> None:
        assert round2(0.125) == pytest.approx(0.13)
        assert round2(-0.125) == pytest.approx(-0.13)

    def test_format_float(self) -> None:
        assert format_float(3.0) == "3.00"
        assert format_float(1008.3) == "1008.30"
        assert format_float(None) == ""

    def test_format_int(self) -> None:
        assert format_int(87) == "87"
        assert format_int(None) == ""
