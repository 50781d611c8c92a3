"""
Fridge inventory endpoints, scoped to the signed-in user.

GET    /api/fridge            — list items, soonest expiry first
POST   /api/fridge            — add an item by hand
DELETE /api/fridge/expired    — clear items past their expiry
PATCH  /api/fridge/{item_id}  — change an item's expiry
DELETE /api/fridge/{item_id}  — delete an item
"""
from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from chopchop.deps import get_store, require_user_id
from chopchop.models.fridge_item import FridgeItemModel
from chopchop.schemas.fridge import (
    ClearExpiredResponse,
    FridgeItemCreate,
    FridgeItemResponse,
    FridgeItemUpdate,
)
from chopchop.store import InventoryStore, StoreError, parse_timestamp

logger = logging.getLogger(__name__)
router = APIRouter()

SECONDS_PER_DAY = 24 * 60 * 60


def days_left(expires_on: Optional[datetime], now: datetime) -> Optional[int]:
    if expires_on is None:
        return None
    return math.ceil((expires_on - now).total_seconds() / SECONDS_PER_DAY)


def freshness(days: Optional[int]) -> str:
    if days is None:
        return "unknown"
    if days < 0:
        return "expired"
    if days <= 2:
        return "urgent"
    if days <= 5:
        return "soon"
    return "fresh"


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def transform_item(model: FridgeItemModel, now: datetime) -> FridgeItemResponse:
    """FridgeItemModel → FridgeItemResponse"""
    expires_on = parse_timestamp(model.expires_on)
    left = days_left(expires_on, now)
    return FridgeItemResponse(
        id=model.id,
        item_name=model.item_name,
        added_on=parse_timestamp(model.added_on),
        expires_on=expires_on,
        days_left=left,
        freshness=freshness(left),
    )


# ── GET /api/fridge ──────────────────────────────────────────────────────
@router.get("/fridge", response_model=List[FridgeItemResponse])
def list_items(
    search: Optional[str] = Query(None),
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
):
    now = datetime.now(timezone.utc)
    rows = store.list_for_user(user_id, search=search)
    logger.info("Found %d fridge items for %s", len(rows), user_id)
    return [transform_item(r, now) for r in rows]


# ── POST /api/fridge ─────────────────────────────────────────────────────
@router.post("/fridge", response_model=FridgeItemResponse)
def add_item(
    req: FridgeItemCreate,
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
):
    now = datetime.now(timezone.utc)
    try:
        [row] = store.insert(
            [
                {
                    "user_id": user_id,
                    "item_name": req.item_name,
                    "added_on": now,
                    "expires_on": start_of_day(req.expires_on),
                }
            ]
        )
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Could not save item: {e}")
    return transform_item(row, now)


# ── DELETE /api/fridge/expired ───────────────────────────────────────────
@router.delete("/fridge/expired", response_model=ClearExpiredResponse)
def clear_expired(
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
):
    try:
        deleted = store.delete_expired(user_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Could not clear expired items: {e}")
    return ClearExpiredResponse(deleted=deleted)


# ── PATCH /api/fridge/{item_id} ──────────────────────────────────────────
@router.patch("/fridge/{item_id}", response_model=FridgeItemResponse)
def update_item(
    item_id: str,
    req: FridgeItemUpdate,
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
):
    try:
        row = store.update_expiry(user_id, item_id, start_of_day(req.expires_on))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Could not update item: {e}")
    if row is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return transform_item(row, datetime.now(timezone.utc))


# ── DELETE /api/fridge/{item_id} ─────────────────────────────────────────
@router.delete("/fridge/{item_id}")
def delete_item(
    item_id: str,
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
):
    try:
        deleted = store.delete(user_id, item_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Could not delete item: {e}")
    if not deleted:
        raise HTTPException(status_code=404, detail="Item not found")
    logger.info("Deleted fridge item %s", item_id)
    return {"message": "Item deleted successfully", "id": item_id}
