"""
HTTP sender that posts Lufft telegrams to the SMS gateway webhook.

Wraps each telegram in the PromoTexter payload shape ``{"number", "msg"}``
and POSTs it to ``{gateway_base_url}/v1/ptexter``. Network failures and
non-200 responses are logged and reported as ``False``; nothing is raised,
so a simulation run keeps going past individual failures.

Operations:
- send(number, telegram): POST one telegram, return success.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-110)

TODO:
- None
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/v1/ptexter"


class TelegramSender:
    """Posts telegrams to the gateway as if relayed by an SMS provider.

    Args:
        gateway_base_url: Base URL of the gateway service.
        timeout_s: Per-request timeout in seconds.
        client: Optional shared ``httpx.AsyncClient``. When omitted a client
            is created per request.

    Usage::

        sender = TelegramSender("http://localhost:8000")
        ok = await sender.send("639171234567", telegram)
    """

    def __init__(
        self,
        gateway_base_url: str,
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = gateway_base_url.rstrip("/") + WEBHOOK_PATH
        self._timeout_s = timeout_s
        self._client = client
        self.sent = 0
        self.failed = 0

    @property
    def url(self) -> str:
        """Full webhook URL."""
        return self._url

    async def send(self, number: str, telegram: str) -> bool:
        """POST one telegram on behalf of *number*.

        Returns:
            ``True`` if the gateway answered 200, ``False`` otherwise.
        """
        payload = {"number": number, "msg": telegram}

        try:
            if self._client is not None:
                response = await self._client.post(
                    self._url, json=payload, timeout=self._timeout_s
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout_s) as client:
                    response = await client.post(self._url, json=payload)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            logger.warning("Send failed (network error): %s", exc)
            self.failed += 1
            return False

        if response.status_code == 200:
            self.sent += 1
            logger.debug("Sent telegram for %s", number)
            return True

        logger.warning(
            "Send failed (HTTP %d) for %s: %s",
            response.status_code,
            number,
            response.text,
        )
        self.failed += 1
        return False
