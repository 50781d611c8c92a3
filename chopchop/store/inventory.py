"""
Fridge inventory CRUD operations, always scoped by owner.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chopchop.models.fridge_item import FridgeItemModel

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The database rejected a write."""


def to_timestamp(value: datetime) -> str:
    """Serialize to the column format; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class InventoryStore:
    """Manages the ``fridge`` table for one database session."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def _commit(self) -> None:
        try:
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error("Store write failed: %s", e)
            raise StoreError(str(e)) from e

    def insert(self, rows: list[dict]) -> list[FridgeItemModel]:
        """Insert all rows in one transaction.

        Each row carries ``user_id``, ``item_name``, ``added_on`` and
        ``expires_on`` (datetimes); ids are assigned here.
        """
        models = [
            FridgeItemModel(
                id=str(uuid.uuid4()),
                user_id=row["user_id"],
                item_name=row["item_name"],
                added_on=to_timestamp(row["added_on"]),
                expires_on=(
                    to_timestamp(row["expires_on"]) if row.get("expires_on") else None
                ),
            )
            for row in rows
        ]
        self._db.add_all(models)
        self._commit()
        logger.info("Inserted %d fridge rows", len(models))
        return models

    def list_for_user(
        self, user_id: str, search: Optional[str] = None
    ) -> list[FridgeItemModel]:
        """Owner's rows, soonest expiry first (rows without expiry last)."""
        query = self._db.query(FridgeItemModel).filter(FridgeItemModel.user_id == user_id)
        if search and search.strip():
            pattern = f"%{_escape_like(search.strip())}%"
            query = query.filter(FridgeItemModel.item_name.ilike(pattern, escape="\\"))
        return query.order_by(
            FridgeItemModel.expires_on.is_(None),
            FridgeItemModel.expires_on.asc(),
        ).all()

    def item_names(self, user_id: str) -> list[str]:
        return [row.item_name for row in self.list_for_user(user_id)]

    def get(self, user_id: str, item_id: str) -> Optional[FridgeItemModel]:
        return (
            self._db.query(FridgeItemModel)
            .filter(FridgeItemModel.id == item_id, FridgeItemModel.user_id == user_id)
            .first()
        )

    def update_expiry(
        self, user_id: str, item_id: str, expires_on: datetime
    ) -> Optional[FridgeItemModel]:
        row = self.get(user_id, item_id)
        if row is None:
            return None
        row.expires_on = to_timestamp(expires_on)
        self._commit()
        return row

    def delete(self, user_id: str, item_id: str) -> bool:
        row = self.get(user_id, item_id)
        if row is None:
            return False
        self._db.delete(row)
        self._commit()
        return True

    def delete_expired(self, user_id: str, now: Optional[datetime] = None) -> int:
        """Delete the owner's rows with ``expires_on <= now``."""
        cutoff = to_timestamp(now or datetime.now(timezone.utc))
        count = (
            self._db.query(FridgeItemModel)
            .filter(
                FridgeItemModel.user_id == user_id,
                FridgeItemModel.expires_on.isnot(None),
                FridgeItemModel.expires_on <= cutoff,
            )
            .delete(synchronize_session=False)
        )
        self._commit()
        logger.info("Cleared %d expired rows for %s", count, user_id)
        return count
