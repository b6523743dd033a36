"""
Add Item Use Case

Creates a new inventory item.
"""

from src.core.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import InventoryItem
from .dtos import AddItemCommand, ItemMutationResponse, ItemResponse


class AddItemUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AddItemCommand) -> Result[ItemMutationResponse]:
        async with self.uow:
            item = InventoryItem(
                name=command.name,
                description=command.description,
                location=command.location,
                quantity=command.quantity,
            )
            item = await self.uow.inventory_items.create(item)

            await self.uow.commit()

            return Return.ok(
                ItemMutationResponse(
                    message="Item added successfully",
                    item=ItemResponse.from_entity(item),
                )
            )
