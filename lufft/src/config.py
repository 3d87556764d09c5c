"""
Traffic simulator configuration loaded from environment variables.

Uses Pydantic BaseSettings for automatic env var loading and validation.
Every value can be overridden by the CLI flags of ``lufft.src.main``.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-109)

TODO:
- None
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings

_VARIANTS = (19, 20, 23, 24)


class SimulatorSettings(BaseSettings):
    """Configuration for sending simulated Lufft telegrams to the gateway.

    Attributes:
        gateway_base_url: Base URL of the SMS gateway webhook service.
        station_numbers: Comma-separated sender mobile numbers; telegrams
            are spread round-robin across them.
        telegram_variant: Layout used for generated telegrams.
        request_count: Number of telegrams to send per run.
        request_timeout_s: Per-request HTTP timeout in seconds.
    """

    gateway_base_url: str = "http://localhost:8000"
    station_numbers: str = "639171234567"
    telegram_variant: int = 23
    request_count: int = 100
    request_timeout_s: float = 10.0

    @property
    def numbers(self) -> list[str]:
        """Sender numbers parsed from :attr:`station_numbers`."""
        return [n.strip() for n in self.station_numbers.split(",") if n.strip()]

    @field_validator("gateway_base_url")
    @classmethod
    def gateway_base_url_must_be_http(cls, v: str) -> str:
        """Validate the gateway URL scheme and drop any trailing slash."""
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError(
                f"GATEWAY_BASE_URL must start with http:// or https:// (got: '{v[:20]}')"
            )
        return v.rstrip("/")

    @field_validator("station_numbers")
    @classmethod
    def station_numbers_must_not_be_empty(cls, v: str) -> str:
        """Require at least one sender number."""
        if not any(n.strip() for n in v.split(",")):
            raise ValueError("STATION_NUMBERS must list at least one number")
        return v

    @field_validator("telegram_variant")
    @classmethod
    def telegram_variant_must_be_known(cls, v: int) -> int:
        """Validate the variant is one of the four known layouts."""
        if v not in _VARIANTS:
            raise ValueError("TELEGRAM_VARIANT must be one of 19, 20, 23, 24")
        return v

    @field_validator("request_count")
    @classmethod
    def request_count_must_be_valid(cls, v: int) -> int:
        """Validate request count is between 1 and 10000."""
        if v < 1 or v > 10000:
            raise ValueError("REQUEST_COUNT must be >= 1 and <= 10000")
        return v

    @field_validator("request_timeout_s")
    @classmethod
    def request_timeout_must_be_positive(cls, v: float) -> float:
        """Validate the HTTP timeout is positive."""
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT_S must be > 0")
        return v

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
