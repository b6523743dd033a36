from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import InventoryItem


class IInventoryItemRepository(ABC):
    """InventoryItem repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        """Get inventory item by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[InventoryItem]:
        """Get all inventory items"""
        pass

    @abstractmethod
    async def list_by_location(self, location: Optional[str]) -> List[InventoryItem]:
        """Get inventory items stored at a location"""
        pass

    @abstractmethod
    async def create(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item"""
        pass

    @abstractmethod
    async def update(self, item: InventoryItem) -> InventoryItem:
        """Update existing inventory item"""
        pass

    @abstractmethod
    async def delete(self, item: InventoryItem) -> None:
        """Delete an inventory item"""
        pass
