"""
Inventory Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user in the inventory workflow"""

    director = "director"
    inventory_manager = "inventoryManager"
    stembassador = "stembassador"


class RequestStatus(str, Enum):
    """Lifecycle status of an item request"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
