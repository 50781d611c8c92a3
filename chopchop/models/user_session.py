"""
Session identity issued by the auth provider integration.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, String

from chopchop.database import Base
from chopchop.navigation import Page


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserSessionModel(Base):
    """Bearer token → user id, plus the page the user was last on."""
    __tablename__ = "sessions"

    token = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    page = Column(
        Enum(Page, native_enum=False, validate_strings=True),
        nullable=False,
        default=Page.AWAITING_SCAN_CHOICE,
    )
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)
