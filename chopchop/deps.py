"""
FastAPI dependencies: identity, store, relay bridge, provider.
"""
from __future__ import annotations

from typing import Iterator, Optional

import httpx
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from chopchop.config import settings
from chopchop.database import get_db
from chopchop.pipeline.bridge import LlmBridge
from chopchop.provider import GeminiProvider, build_provider_client
from chopchop.store import InventoryStore, resolve_user_id


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_user_id(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
) -> Optional[str]:
    """Caller's user id, or ``None`` without a valid session."""
    return resolve_user_id(db, token)


def require_user_id(user_id: Optional[str] = Depends(get_user_id)) -> str:
    if not user_id:
        raise HTTPException(status_code=401, detail="No user logged in.")
    return user_id


def get_store(db: Session = Depends(get_db)) -> InventoryStore:
    return InventoryStore(db)


def get_bridge() -> Iterator[LlmBridge]:
    with httpx.Client(
        base_url=settings.RELAY_URL, timeout=settings.RELAY_TIMEOUT_SECONDS
    ) as client:
        yield LlmBridge(client)


def get_provider() -> Iterator[GeminiProvider]:
    with build_provider_client() as client:
        yield GeminiProvider(
            client, api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL
        )
