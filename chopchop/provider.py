"""
Generative-language provider client, used only by the relay.

The API key is attached here and never leaves the server.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from chopchop.config import settings

logger = logging.getLogger(__name__)


class ProviderNotConfigured(RuntimeError):
    pass


def first_candidate_text(data: Any) -> str:
    """Text of the first candidate's first part, or ``""``."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class GeminiProvider:
    """Thin ``generateContent`` client."""

    def __init__(
        self,
        client: httpx.Client,
        api_key: str = "",
        model: str = "gemini-1.5-flash",
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._model = model

    def generate_content(self, payload: dict) -> httpx.Response:
        """Forward *payload* verbatim; the caller inspects the response."""
        if not self._api_key:
            raise ProviderNotConfigured("GEMINI_API_KEY is not configured")
        logger.info("Provider request: model=%s", self._model)
        return self._client.post(
            f"/models/{self._model}:generateContent",
            params={"key": self._api_key},
            json=payload,
        )


def build_provider_client() -> httpx.Client:
    return httpx.Client(
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.GEMINI_TIMEOUT_SECONDS,
        headers={"Content-Type": "application/json"},
    )
