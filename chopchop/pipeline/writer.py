"""
Inventory writer — turns candidate items into fridge rows.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol, Sequence

from chopchop.errors import NoAuthenticatedUser, PersistenceFailure
from chopchop.schemas import CandidateItem, InventoryRecord
from chopchop.store import StoreError, parse_timestamp

logger = logging.getLogger(__name__)


class RowStore(Protocol):
    def insert(self, rows: list[dict]) -> list: ...


def expiry_for(added_on: datetime, perish_days: int) -> datetime:
    """Calendar-day arithmetic; no business-day handling."""
    return added_on + timedelta(days=perish_days)


class InventoryWriter:
    def __init__(self, store: RowStore) -> None:
        self._store = store

    def build_rows(
        self, user_id: str, items: Sequence[CandidateItem], now: datetime
    ) -> list[dict]:
        return [
            {
                "user_id": user_id,
                "item_name": item.name,
                "added_on": now,
                "expires_on": expiry_for(now, item.perish_days),
            }
            for item in items
        ]

    def write(
        self,
        user_id: Optional[str],
        items: Sequence[CandidateItem],
        now: Optional[datetime] = None,
    ) -> list[InventoryRecord]:
        """Insert all *items* for *user_id* in one batch."""
        if not user_id:
            logger.warning("Inventory write refused: no authenticated user")
            raise NoAuthenticatedUser()
        if not items:
            logger.info("Inventory write skipped: no items")
            return []

        now = now or datetime.now(timezone.utc)
        rows = self.build_rows(user_id, items, now)
        try:
            inserted = self._store.insert(rows)
        except StoreError as e:
            logger.error("Inventory insert failed for %s: %s", user_id, e)
            raise PersistenceFailure(f"Could not save items: {e}") from e

        logger.info("Stored %d items for %s", len(inserted), user_id)
        return [
            InventoryRecord(
                id=row.id,
                user_id=row.user_id,
                item_name=row.item_name,
                added_on=parse_timestamp(row.added_on),
                expires_on=parse_timestamp(row.expires_on),
            )
            for row in inserted
        ]
