"""
List Inventory Use Case

Returns all inventory items, or only those at one location.
"""

from typing import List, Optional

from src.core.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ItemResponse


class ListInventoryUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, location: Optional[str] = None) -> Result[List[ItemResponse]]:
        async with self.uow:
            if location is None:
                items = await self.uow.inventory_items.list_all()
            else:
                items = await self.uow.inventory_items.list_by_location(location)

            return Return.ok([ItemResponse.from_entity(item) for item in items])
