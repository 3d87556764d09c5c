"""
Health check endpoint for the SMS gateway.

Provides a simple GET /health endpoint that returns the service status and
the telegram variants this build decodes. No authentication is required --
this is intended for Docker HEALTHCHECK and internal monitoring only.

CHANGELOG:
- 2026-10-19: Report supported telegram variants
- 2026-10-19: Initial creation (STORY-115)

TODO:
- None
"""

from fastapi import APIRouter

from lufft.src.layouts import Variant

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, object]:
    """Return a simple health status.

    Returns:
        dict: ``{"status": "ok", "variants": [19, 20, 23, 24]}``.
    """
    return {"status": "ok", "variants": [v.value for v in Variant]}
