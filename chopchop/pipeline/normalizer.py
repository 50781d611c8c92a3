"""
Response normalizer.

The item-list shape is only *requested* from the model, so every reply is
treated as untrusted: the whole array parses or the run fails.
"""
from __future__ import annotations

import json
import math
import re
from typing import Any

from chopchop.errors import MalformedExtraction
from chopchop.schemas import CandidateItem

_LEADING_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")
_RECIPE_HEADING = re.compile(r"^##[ \t]+", re.MULTILINE)

NAME_KEYS = ("item", "name")
PERISH_KEYS = ("perish_in_days", "perish_days")

# Upper bound on a shelf life, roughly a century
MAX_PERISH_DAYS = 36500


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def strip_fences(text: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence."""
    cleaned = _LEADING_FENCE.sub("", text.strip(), count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def _first_present(obj: dict, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in obj:
            return obj[key]
    return None


def _perish_days(value: Any) -> int | None:
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        days = math.floor(value)
        return days if 0 <= days <= MAX_PERISH_DAYS else None
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_items(raw_text: str) -> list[CandidateItem]:
    """Parse an item-list reply into ``CandidateItem`` records, in order."""
    cleaned = strip_fences(raw_text)
    try:
        payload = json.loads(cleaned)
    except ValueError as e:
        raise MalformedExtraction(cleaned) from e

    if not isinstance(payload, list):
        raise MalformedExtraction(cleaned, "expected a JSON array")

    items: list[CandidateItem] = []
    for idx, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise MalformedExtraction(cleaned, f"entry {idx} is not an object")
        name = _first_present(entry, NAME_KEYS)
        if not isinstance(name, str) or not name.strip():
            raise MalformedExtraction(cleaned, f"entry {idx} has no item name")
        days = _perish_days(_first_present(entry, PERISH_KEYS))
        if days is None:
            raise MalformedExtraction(cleaned, f"entry {idx} has no valid perish days")
        items.append(CandidateItem(name=name.strip(), perish_days=days))
    return items


def split_recipes(markdown: str) -> list[str]:
    """Split markdown into one ``## ``-headed block per recipe.

    Text before the first level-2 heading is dropped.
    """
    segments = _RECIPE_HEADING.split(markdown)
    recipes: list[str] = []
    for segment in segments[1:]:
        body = segment.strip()
        if body:
            recipes.append(f"## {body}")
    return recipes
