"""
Canonical pipeline contracts — Pydantic v2 models shared by the scan and
recipe pipelines and the relay.
"""
from __future__ import annotations

import enum
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Pipeline records
# ---------------------------------------------------------------------------

class CandidateItem(BaseModel):
    """One normalized ``(name, perish_days)`` pair read from the LLM reply."""
    name: str = Field(..., description="Item name, may start with an emoji")
    perish_days: int = Field(..., ge=0)


class InventoryRecord(BaseModel):
    id: str
    user_id: str
    item_name: str
    added_on: datetime
    expires_on: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Relay envelopes
# ---------------------------------------------------------------------------

class RelayResponse(BaseModel):
    text: str = ""


class RelayError(BaseModel):
    error: str
    details: Optional[Any] = None


# ---------------------------------------------------------------------------
# API request / response envelopes
# ---------------------------------------------------------------------------

class DietaryFilter(str, enum.Enum):
    VEGETARIAN = "Vegetarian"
    HIGH_PROTEIN = "High Protein"
    CHICKEN_DISHES = "Chicken Dishes"
    HIGH_VEGGIE = "High Veggie"
    LOW_CALORIE = "Low Calorie"


class ScanResponse(BaseModel):
    items: list[CandidateItem] = Field(default_factory=list)
    records: list[InventoryRecord] = Field(default_factory=list)


class RecipeRequest(BaseModel):
    filters: list[DietaryFilter] = Field(default_factory=list)


class RecipeResponse(BaseModel):
    ingredients: list[str] = Field(default_factory=list)
    recipes: list[str] = Field(
        default_factory=list,
        description="One markdown block per recipe, each starting with '## '",
    )
