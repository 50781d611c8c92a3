"""
Session endpoints — identity lookup, page restoration, sign-out.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from chopchop.database import get_db
from chopchop.deps import bearer_token
from chopchop.models.user_session import UserSessionModel
from chopchop.navigation import InvalidTransition, NavEvent, Page, next_page, restore_page
from chopchop.schemas.session import NavigateRequest, SessionResponse
from chopchop.store import close_session, get_session

logger = logging.getLogger(__name__)
router = APIRouter()


def _require_session(db: Session, token: Optional[str]) -> UserSessionModel:
    session = get_session(db, token)
    if session is None:
        raise HTTPException(status_code=401, detail="No user logged in.")
    return session


# ── GET /api/session ─────────────────────────────────────────────────────
@router.get("/session", response_model=SessionResponse)
def read_session(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
):
    session = _require_session(db, token)
    return SessionResponse(user_id=session.user_id, page=restore_page(True, session.page))


# ── POST /api/session/navigate ───────────────────────────────────────────
@router.post("/session/navigate", response_model=SessionResponse)
def navigate(
    req: NavigateRequest,
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
):
    session = _require_session(db, token)
    current = restore_page(True, session.page)
    try:
        page = next_page(current, req.event)
    except InvalidTransition as e:
        raise HTTPException(status_code=400, detail=str(e))

    if req.event is NavEvent.SIGNED_OUT:
        user_id = session.user_id
        close_session(db, session.token)
        return SessionResponse(user_id=user_id, page=page)

    session.page = page
    db.commit()
    logger.info("Session %s: %s --%s--> %s", session.user_id, current.value, req.event.value, page.value)
    return SessionResponse(user_id=session.user_id, page=page)


# ── DELETE /api/session ──────────────────────────────────────────────────
@router.delete("/session")
def sign_out(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db),
):
    session = _require_session(db, token)
    close_session(db, session.token)
    return {"page": Page.LOGGED_OUT.value}
