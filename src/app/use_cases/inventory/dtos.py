"""
Inventory Use Case DTOs (Data Transfer Objects)

All Command and Response classes for inventory domain.
"""

from typing import Optional
from pydantic import BaseModel

from src.domain.entities import InventoryItem


# ============================================================================
# Command DTOs
# ============================================================================


class AddItemCommand(BaseModel):
    """New inventory item"""

    name: str
    location: str
    quantity: int
    description: Optional[str] = None


class EditItemCommand(BaseModel):
    """Partial update of an inventory item; unset fields are left unchanged"""

    name: Optional[str] = None
    location: Optional[str] = None
    quantity: Optional[int] = None
    description: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ItemResponse(BaseModel):
    """Inventory item in responses"""

    id: str
    name: str
    description: Optional[str] = None
    location: str
    quantity: int

    @classmethod
    def from_entity(cls, item: InventoryItem) -> "ItemResponse":
        return cls(
            id=str(item.id),
            name=item.name,
            description=item.description,
            location=item.location,
            quantity=item.quantity,
        )


class ItemMutationResponse(BaseModel):
    """Response for add/edit item use cases"""

    message: str
    item: ItemResponse
