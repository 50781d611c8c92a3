"""
Relay Service.

POST /api/gemini — forward a prompt payload to the provider, return its text.

No authentication and no validation beyond JSON parseability: malformed
shapes go to the provider unchanged and fail there.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from chopchop.deps import get_provider
from chopchop.provider import GeminiProvider, first_candidate_text
from chopchop.schemas import RelayError, RelayResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def _error(error: str, details: Any = None) -> JSONResponse:
    body = RelayError(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=500, content=body)


# ── POST /api/gemini ─────────────────────────────────────────────────────
@router.post(
    "/gemini",
    response_model=RelayResponse,
    responses={500: {"model": RelayError}},
)
def relay_gemini(
    body: Any = Body(...),
    provider: GeminiProvider = Depends(get_provider),
):
    # Only the contents field is forwarded, and only when the caller sent it
    payload = {}
    if isinstance(body, dict) and "contents" in body:
        payload["contents"] = body["contents"]
    logger.info("Relay: incoming request (%s)", type(body).__name__)

    try:
        resp = provider.generate_content(payload)
        data = resp.json()
    except Exception:
        logger.exception("Relay: request to provider failed")
        return _error("Server error")

    if resp.is_error:
        logger.error("Relay: Gemini API error %d: %s", resp.status_code, data)
        return _error("Gemini API error", details=data)

    text = first_candidate_text(data)
    logger.info("Relay: Gemini response len=%d", len(text))
    return RelayResponse(text=text)
