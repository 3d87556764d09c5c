"""
SMS gateway webhook service for Lufft weather stations.

Receives telegrams relayed by SMS providers, normalises sender numbers and
decodes the message body with the Lufft telegram codec.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-112)

TODO:
- None
"""
