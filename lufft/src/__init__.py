"""
Lufft weather-station telegram codec.

Decodes the ``+``-delimited text telegrams that Lufft stations send over SMS
into typed observation and device-health records, and encodes records back
into the same wire format for fixtures and simulated traffic.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-101)

TODO:
- None
"""
