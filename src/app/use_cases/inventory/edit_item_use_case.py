"""
Edit Item Use Case

Updates the fields of an inventory item that were supplied by the caller.
"""

from uuid import UUID

from src.core.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import EditItemCommand, ItemMutationResponse, ItemResponse


class EditItemUseCase:
    """
    Use case for editing an inventory item.

    Business Rules:
    - Only fields present (and not null) in the command are changed
    - Unknown item fails with ITEM_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, item_id: UUID, command: EditItemCommand) -> Result[ItemMutationResponse]:
        async with self.uow:
            item = await self.uow.inventory_items.get_by_id(item_id)
            if item is None:
                return Return.err(Error("ITEM_NOT_FOUND", "Item not found"))

            for field, value in command.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(item, field, value)
            item = await self.uow.inventory_items.update(item)

            await self.uow.commit()

            return Return.ok(
                ItemMutationResponse(
                    message="Item updated successfully",
                    item=ItemResponse.from_entity(item),
                )
            )
