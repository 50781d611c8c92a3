"""
Session / navigation schemas.
"""
from __future__ import annotations

from pydantic import BaseModel

from chopchop.navigation import NavEvent, Page


class SessionResponse(BaseModel):
    user_id: str
    page: Page


class NavigateRequest(BaseModel):
    event: NavEvent
