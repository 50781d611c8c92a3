"""
Session identity: bearer token → user id.

Tokens are issued by the auth provider integration through
:func:`open_session`; this service only resolves and revokes them.
"""
from __future__ import annotations

import logging
import secrets
from typing import Optional

from sqlalchemy.orm import Session

from chopchop.models.user_session import UserSessionModel
from chopchop.navigation import NavEvent, Page, next_page

logger = logging.getLogger(__name__)


def open_session(db: Session, user_id: str) -> UserSessionModel:
    """Record a sign-in and return the new session row."""
    session = UserSessionModel(
        token=secrets.token_urlsafe(32),
        user_id=user_id,
        page=next_page(Page.LOGGED_OUT, NavEvent.SIGNED_IN),
    )
    db.add(session)
    db.commit()
    logger.info("Opened session for %s", user_id)
    return session


def get_session(db: Session, token: Optional[str]) -> Optional[UserSessionModel]:
    if not token:
        return None
    return db.query(UserSessionModel).filter(UserSessionModel.token == token).first()


def resolve_user_id(db: Session, token: Optional[str]) -> Optional[str]:
    session = get_session(db, token)
    return session.user_id if session else None


def close_session(db: Session, token: str) -> bool:
    session = get_session(db, token)
    if session is None:
        return False
    db.delete(session)
    db.commit()
    logger.info("Closed session for %s", session.user_id)
    return True
