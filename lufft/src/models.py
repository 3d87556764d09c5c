"""
Pydantic models for decoded Lufft telegrams.

Defines the Observation and DeviceHealth records produced by the decoder and
consumed by the encoder, plus the LufftReading pair that travels between
them. Every numeric field is optional: ``None`` means the station sent no
usable value, which is different from a genuine zero reading.

CHANGELOG:
- 2026-10-19: Add LufftReading pair and freeze all records
- 2026-10-19: Initial creation (STORY-101)

TODO:
- None
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Observation(BaseModel):
    """A single weather observation decoded from a telegram.

    Attributes:
        pres: Atmospheric pressure in hPa.
        rr: Rain rate in mm.
        rh: Relative humidity in percent.
        temp: Air temperature in degrees Celsius.
        td: Dew point in degrees Celsius.
        wdir: Wind direction in degrees.
        wspd: Wind speed in m/s.
        wspdx: Wind gust in m/s.
        srad: Solar radiation in W/m2.
        wchill: Wind chill in degrees Celsius.
        timestamp: Observation time. Always set; receipt time is substituted
            when the telegram's own timestamp is missing or implausible.
    """

    model_config = ConfigDict(frozen=True)

    pres: float | None = None
    rr: float | None = None
    rh: float | None = None
    temp: float | None = None
    td: float | None = None
    wdir: float | None = None
    wspd: float | None = None
    wspdx: float | None = None
    srad: float | None = None
    wchill: float | None = None
    timestamp: datetime


class DeviceHealth(BaseModel):
    """Device status decoded from the same telegram as an Observation.

    Attributes:
        vb1: Primary battery voltage.
        vb2: Secondary battery voltage.
        curr: Current draw in A.
        bp1: Barometric sensor reading 1.
        bp2: Barometric sensor reading 2.
        cm: Communications module code.
        ss: Signal strength.
        temp_arq: Temperature sensor accuracy.
        rh_arq: Humidity sensor accuracy.
        fpm: Firmware code.
        error_msg: Timestamp plausibility violation, empty when none.
        message: The telegram text after gateway artifacts were stripped.
        data_count: Number of observation fields present (0-10).
        data_status: One ``'1'``/``'0'`` per observation field.
        timestamp: Same instant as the paired Observation.
        minutes_difference: Receipt time minus telegram time, in minutes.
    """

    model_config = ConfigDict(frozen=True)

    vb1: float | None = None
    vb2: float | None = None
    curr: float | None = None
    bp1: float | None = None
    bp2: float | None = None
    cm: str = ""
    ss: int | None = None
    temp_arq: float | None = None
    rh_arq: float | None = None
    fpm: str = ""
    error_msg: str = ""
    message: str = ""
    data_count: int = 0
    data_status: str = ""
    timestamp: datetime
    minutes_difference: int = 0


class LufftReading(BaseModel):
    """The (observation, health) pair carried by one telegram."""

    model_config = ConfigDict(frozen=True)

    observation: Observation
    health: DeviceHealth
