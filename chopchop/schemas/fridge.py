"""
Fridge inventory API schemas.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FridgeItemCreate(BaseModel):
    """Manually added item"""
    model_config = ConfigDict(str_strip_whitespace=True)

    item_name: str = Field(..., min_length=1)
    expires_on: date


class FridgeItemUpdate(BaseModel):
    """Expiry edit"""
    expires_on: date


class FridgeItemResponse(BaseModel):
    id: str
    item_name: str
    added_on: datetime
    expires_on: Optional[datetime] = None
    days_left: Optional[int] = None
    freshness: str = Field(..., description="expired|urgent|soon|fresh|unknown")


class ClearExpiredResponse(BaseModel):
    deleted: int
