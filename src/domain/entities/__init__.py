"""
Inventory Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import UserRole, RequestStatus

# Export all entities
from .user import User
from .inventory_item import InventoryItem
from .item_request import ItemRequest

__all__ = [
    # Enums
    "UserRole",
    "RequestStatus",
    # Entities
    "User",
    "InventoryItem",
    "ItemRequest",
]
