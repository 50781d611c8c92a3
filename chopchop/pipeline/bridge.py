"""
LLM bridge — builds prompts and sends them through the same-origin relay.

The relay contract is ``POST /api/gemini`` with
``{"contents": [{"parts": [{"text": ...}]}]}`` → ``{"text": ...}``.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import httpx

from chopchop.errors import LlmEmptyResponse, LlmUnavailable, RelayFailure

logger = logging.getLogger(__name__)

RELAY_PATH = "/api/gemini"

ITEM_PROMPT = (
    "Extract a deduplicated list of generic grocery items from this receipt text. "
    "For each item, estimate perish days. Add a relevant emoji before each item name. "
    'Return as JSON like [{{"item": "🍞 Bread", "perish_in_days": 5}}].'
    "\n\nReceipt:\n{receipt_text}"
)

RECIPE_PROMPT = (
    "Given the following ingredients from my fridge: {ingredients}.\n\n"
    "I want {count} detailed recipe suggestions that:\n"
    "- Prioritize ingredients that will expire soon.\n"
    "- Fit these dietary filters: {filters}.\n"
    "- Format the response in clean Markdown:\n"
    "  - Use H2 headings (##) for each recipe title\n"
    "  - Bold section titles like **Ingredients:** and **Instructions:**\n"
    "  - Bullet lists for ingredients\n"
    "  - Numbered steps for instructions\n\n"
    "Please avoid extra text outside the recipes."
)


def build_item_prompt(receipt_text: str) -> str:
    return ITEM_PROMPT.format(receipt_text=receipt_text)


def build_recipe_prompt(
    ingredients: Iterable[str], filters: Iterable[str] = (), count: int = 3
) -> str:
    filter_list = [str(f) for f in filters]
    return RECIPE_PROMPT.format(
        ingredients=", ".join(ingredients),
        filters=", ".join(filter_list) if filter_list else "any",
        count=count,
    )


def wrap_prompt(prompt: str) -> dict:
    """Shape a prompt the way the provider expects it."""
    return {"contents": [{"parts": [{"text": prompt}]}]}


def response_text(data: Any) -> Optional[str]:
    """Pull text from a relay reply: ``text`` first, then the first candidate.

    Returns ``None`` when neither holds a non-blank string.
    """
    if not isinstance(data, dict):
        return None
    text = data.get("text")
    if isinstance(text, str) and text.strip():
        return text
    candidates = data.get("candidates")
    if isinstance(candidates, list) and candidates:
        first = candidates[0]
        try:
            text = first["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        if isinstance(text, str) and text.strip():
            return text
    return None


class LlmBridge:
    """Sends prompts to the relay over an ``httpx.Client``."""

    def __init__(self, client: httpx.Client, path: str = RELAY_PATH) -> None:
        self._client = client
        self._path = path

    def complete(self, prompt: str) -> str:
        """Return the provider's raw text for *prompt*."""
        logger.info("Relay request: prompt len=%d", len(prompt))
        try:
            resp = self._client.post(self._path, json=wrap_prompt(prompt))
        except httpx.HTTPError as e:
            logger.error("Relay unreachable: %s", e)
            raise LlmUnavailable(f"Could not reach the recipe assistant: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if resp.is_error:
            logger.error("Relay error %d: %s", resp.status_code, data)
            raise RelayFailure(resp.status_code, data)

        text = response_text(data)
        if text is None:
            logger.warning("Relay returned no usable text: %s", data)
            raise LlmEmptyResponse("Gemini returned no usable text.")
        logger.info("Relay response: len=%d", len(text))
        return text

    def extract_items(self, receipt_text: str) -> str:
        return self.complete(build_item_prompt(receipt_text))

    def suggest_recipes(
        self, ingredients: Iterable[str], filters: Iterable[str] = (), count: int = 3
    ) -> str:
        return self.complete(build_recipe_prompt(ingredients, filters, count))
