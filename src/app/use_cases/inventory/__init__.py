"""
Inventory Use Cases

Inventory item listing and maintenance.
"""

from .list_inventory_use_case import ListInventoryUseCase
from .add_item_use_case import AddItemUseCase
from .edit_item_use_case import EditItemUseCase
from .delete_item_use_case import DeleteItemUseCase
from .dtos import AddItemCommand, EditItemCommand, ItemResponse, ItemMutationResponse

__all__ = [
    "ListInventoryUseCase",
    "AddItemUseCase",
    "EditItemUseCase",
    "DeleteItemUseCase",
    "AddItemCommand",
    "EditItemCommand",
    "ItemResponse",
    "ItemMutationResponse",
]
