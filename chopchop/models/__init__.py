from chopchop.models.fridge_item import FridgeItemModel
from chopchop.models.user_session import UserSessionModel

__all__ = ["FridgeItemModel", "UserSessionModel"]
