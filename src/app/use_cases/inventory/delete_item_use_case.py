"""
Delete Item Use Case

Removes an inventory item. Requests that referenced it keep their history
and are reported with an unknown item name.
"""

from uuid import UUID

from src.core.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import MessageResponse


class DeleteItemUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, item_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            item = await self.uow.inventory_items.get_by_id(item_id)
            if item is None:
                return Return.err(Error("ITEM_NOT_FOUND", "Item not found"))

            await self.uow.inventory_items.delete(item)

            await self.uow.commit()

            return Return.ok(MessageResponse(message="Item deleted successfully"))
