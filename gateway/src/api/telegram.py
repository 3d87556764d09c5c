"""
POST /v1/ptexter webhook for Lufft telegrams relayed by the PromoTexter SMS
gateway.

Accepts ``{"number": ..., "msg": ...}``, normalises the sender number,
decodes the telegram with the receipt time as the plausibility reference,
and returns the decoded observation and health records. Locating the
station and persisting the records belong to the caller of this service.

CHANGELOG:
- 2026-10-19: Initial creation (STORY-114)

TODO:
- None
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from gateway.src.mobile import parse_mobile_number
from lufft.src.decoder import decode, detect_variant
from lufft.src.layouts import InvalidTelegramError
from lufft.src.models import DeviceHealth, Observation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["ptexter"])


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class TelegramIn(BaseModel):
    """Inbound SMS as posted by the gateway."""

    number: str = Field(min_length=1)
    msg: str = Field(min_length=1)


class TelegramResponse(BaseModel):
    """Decoded telegram returned to the caller."""

    mobile_number: str
    variant: int
    observation: Observation
    health: DeviceHealth


# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------


@router.post("/ptexter", response_model=TelegramResponse)
async def receive_telegram(payload: TelegramIn, request: Request) -> TelegramResponse:
    """Decode a Lufft telegram received over SMS.

    Args:
        payload: Sender number and message body.
        request: The incoming FastAPI request (for app config).

    Returns:
        TelegramResponse: The normalised sender and decoded records.

    Raises:
        HTTPException: 400 if the message is too long, the telegram has an
            unknown token count, or the sender number is invalid.
    """
    config = request.app.state.config

    max_length = int(config.get("MAX_MESSAGE_LENGTH", "480"))
    if len(payload.msg) > max_length:
        logger.warning(
            "[PromoTexter] Message too long: sender=%s length=%d",
            payload.number,
            len(payload.msg),
        )
        raise HTTPException(
            status_code=400,
            detail=f"Message exceeds limit of {max_length} characters.",
        )

    try:
        reading = decode(payload.msg, now=datetime.now(tz=UTC))
    except InvalidTelegramError as exc:
        logger.warning(
            "[PromoTexter] Invalid string: sender=%s msg=%r", payload.number, payload.msg
        )
        raise HTTPException(status_code=400, detail=str(exc)) from None

    mobile_number = parse_mobile_number(payload.number)
    if mobile_number is None:
        logger.warning(
            "[PromoTexter] Invalid mobile number: sender=%s msg=%r",
            payload.number,
            payload.msg,
        )
        raise HTTPException(
            status_code=400,
            detail=f"invalid mobile number: {payload.number}",
        )

    if reading.health.error_msg:
        logger.warning(
            "[PromoTexter] Timestamp replaced for %s: %s",
            mobile_number,
            reading.health.error_msg,
        )

    logger.info(
        "[PromoTexter] Decoded telegram from %s: data_status=%s",
        mobile_number,
        reading.health.data_status,
    )

    return TelegramResponse(
        mobile_number=mobile_number,
        variant=detect_variant(payload.msg),
        observation=reading.observation,
        health=reading.health,
    )
