from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.item_request_repository import IItemRequestRepository
from src.domain.entities import InventoryItem, ItemRequest, RequestStatus


class ItemRequestRepository(IItemRequestRepository):
    """ItemRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[ItemRequest]:
        """Get item request by ID"""
        stmt = select(ItemRequest).where(ItemRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, item_request: ItemRequest) -> ItemRequest:
        """Create a new item request"""
        self.session.add(item_request)
        await self.session.flush()
        await self.session.refresh(item_request)
        return item_request

    async def update(self, item_request: ItemRequest) -> ItemRequest:
        """Update existing item request"""
        self.session.add(item_request)
        await self.session.flush()
        await self.session.refresh(item_request)
        return item_request

    async def list_with_items(
        self,
        status: Optional[RequestStatus] = None,
        requested_by: Optional[str] = None,
    ) -> List[Tuple[ItemRequest, Optional[InventoryItem]]]:
        """Get requests joined with their inventory item, newest first"""
        stmt = select(ItemRequest, InventoryItem).outerjoin(
            InventoryItem, ItemRequest.item_id == InventoryItem.id
        )
        if status is not None:
            stmt = stmt.where(ItemRequest.status == status)
        if requested_by is not None:
            stmt = stmt.where(ItemRequest.requested_by == requested_by)
        stmt = stmt.order_by(ItemRequest.requested_at.desc())

        result = await self.session.exec(stmt)
        return [(item_request, item) for item_request, item in result.all()]
