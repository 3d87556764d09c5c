"""
Integration tests for the POST /v1/ptexter webhook.

Tests verify:
- A valid telegram returns 200 with the normalised number, the variant and
  the decoded observation and health records.
- Gateway artifacts in the message are tolerated.
- Stale timestamps are replaced by the receipt time and reported.
- Unknown token counts, invalid numbers and oversized messages return 400.
- Missing or empty fields return 422.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-114)
"""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

_URL = "/v1/ptexter"
_NUMBER = "09171234567"


class TestValidTelegram:
    """Successful decoding."""

    def test_returns_decoded_records(self, client: TestClient, fresh_telegram: str) -> None:
        response = client.post(_URL, json={"number": _NUMBER, "msg": fresh_telegram})

        assert response.status_code == 200
        body = response.json()
        assert body["mobile_number"] == "639171234567"
        assert body["variant"] == 23
        assert body["health"]["error_msg"] == ""
        assert body["health"]["data_count"] == 10
        assert body["health"]["message"] == fresh_telegram
        assert body["observation"]["timestamp"] == body["health"]["timestamp"]

    def test_gateway_artifacts_tolerated(self, client: TestClient, fresh_telegram: str) -> None:
        msg = fresh_telegram.replace("+", "%20", 2) + ">"
        response = client.post(_URL, json={"number": _NUMBER, "msg": msg})

        assert response.status_code == 200
        assert response.json()["health"]["message"] == fresh_telegram

    def test_stale_timestamp_replaced(self, client: TestClient, stale_telegram: str) -> None:
        before = datetime.now(tz=UTC)
        response = client.post(_URL, json={"number": _NUMBER, "msg": stale_telegram})

        assert response.status_code == 200
        body = response.json()
        assert body["variant"] == 24
        assert "behind" in body["health"]["error_msg"]
        assert datetime.fromisoformat(body["observation"]["timestamp"]) >= before
        assert body["observation"]["temp"] == 31.5
        assert body["health"]["cm"] == "WX12"


class TestRejectedRequests:
    """Client errors."""

    def test_invalid_string(self, client: TestClient) -> None:
        response = client.post(_URL, json={"number": _NUMBER, "msg": "hello station"})

        assert response.status_code == 400
        assert "invalid string" in response.json()["detail"]

    def test_invalid_mobile_number(self, client: TestClient, fresh_telegram: str) -> None:
        response = client.post(_URL, json={"number": "12345", "msg": fresh_telegram})

        assert response.status_code == 400
        assert response.json()["detail"] == "invalid mobile number: 12345"

    def test_message_too_long(self, client: TestClient) -> None:
        response = client.post(_URL, json={"number": _NUMBER, "msg": "0+" * 300})

        assert response.status_code == 400
        assert "480" in response.json()["detail"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"number": _NUMBER},
            {"msg": "0+1"},
            {"number": "", "msg": "0+1"},
            {"number": _NUMBER, "msg": ""},
        ],
    )
    def test_missing_fields(self, client: TestClient, payload: dict[str, str]) -> None:
        assert client.post(_URL, json=payload).status_code == 422
