"""
InventoryItem Entity

A stock item kept at a storage location.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class InventoryItem(SQLModel, table=True):
    """
    InventoryItem entity - a stock item at a storage location.

    Business Rules:
    - Location is a short shelf code such as "A1" or "B2"
    - Quantity is the number of units currently on hand
    """

    __tablename__ = "inventory_items"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = None
    location: str = Field(index=True, max_length=64)
    quantity: int
