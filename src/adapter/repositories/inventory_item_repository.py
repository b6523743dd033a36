from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.inventory_item_repository import IInventoryItemRepository
from src.domain.entities import InventoryItem


class InventoryItemRepository(IInventoryItemRepository):
    """InventoryItem repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        """Get inventory item by ID"""
        stmt = select(InventoryItem).where(InventoryItem.id == item_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[InventoryItem]:
        """Get all inventory items"""
        result = await self.session.exec(select(InventoryItem))
        return list(result.all())

    async def list_by_location(self, location: Optional[str]) -> List[InventoryItem]:
        """Get inventory items stored at a location"""
        stmt = select(InventoryItem).where(InventoryItem.location == location)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item"""
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update(self, item: InventoryItem) -> InventoryItem:
        """Update existing inventory item"""
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete(self, item: InventoryItem) -> None:
        """Delete an inventory item"""
        await self.session.delete(item)
        await self.session.flush()
