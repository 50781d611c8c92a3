"""
Row storage for the fridge collection and session identity.
"""
from chopchop.store.inventory import InventoryStore, StoreError, parse_timestamp, to_timestamp
from chopchop.store.sessions import close_session, get_session, open_session, resolve_user_id

__all__ = [
    "InventoryStore",
    "StoreError",
    "parse_timestamp",
    "to_timestamp",
    "close_session",
    "get_session",
    "open_session",
    "resolve_user_id",
]
