from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import InventoryItem, ItemRequest, RequestStatus


class IItemRequestRepository(ABC):
    """ItemRequest repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[ItemRequest]:
        """Get item request by ID"""
        pass

    @abstractmethod
    async def create(self, item_request: ItemRequest) -> ItemRequest:
        """Create a new item request"""
        pass

    @abstractmethod
    async def update(self, item_request: ItemRequest) -> ItemRequest:
        """Update existing item request"""
        pass

    @abstractmethod
    async def list_with_items(
        self,
        status: Optional[RequestStatus] = None,
        requested_by: Optional[str] = None,
    ) -> List[Tuple[ItemRequest, Optional[InventoryItem]]]:
        """
        Get requests joined with their inventory item, newest first.

        The item is None when it has been deleted since the request was made.
        """
        pass
