"""
SQLAlchemy model for fridge inventory rows.
"""
from sqlalchemy import Column, String

from chopchop.database import Base


class FridgeItemModel(Base):
    __tablename__ = "fridge"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    item_name = Column(String, nullable=False)
    # ISO-8601 UTC, millisecond precision: lexical order == chronological order
    added_on = Column(String, nullable=False)
    expires_on = Column(String, index=True)
