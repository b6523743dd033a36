from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import MessageResponse
from src.app.use_cases.inventory import (
    AddItemCommand,
    AddItemUseCase,
    DeleteItemUseCase,
    EditItemCommand,
    EditItemUseCase,
    ItemMutationResponse,
    ItemResponse,
    ListInventoryUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/inventory", tags=["Inventory"])


class AddItemRequest(BaseModel):
    """Add inventory item HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=64, description="Shelf code, e.g. A1")
    quantity: int = Field(..., ge=0)
    description: Optional[str] = None


class EditItemRequest(BaseModel):
    """Edit inventory item HTTP request payload; omitted fields are kept"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    location: Optional[str] = Field(default=None, min_length=1, max_length=64)
    quantity: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None


def _raise_for(error):
    if error.code == "ITEM_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ItemResponse])
async def list_inventory(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all inventory items"""
    result = await ListInventoryUseCase(uow).execute()
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/filter", status_code=status.HTTP_200_OK, response_model=List[ItemResponse])
async def filter_inventory(
    location: Optional[str] = Query(default=None, description="Shelf code, e.g. A1"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List inventory items at one location"""
    result = await ListInventoryUseCase(uow).execute(location=location or "")
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("/add", status_code=status.HTTP_201_CREATED, response_model=ItemMutationResponse)
async def add_item(request: AddItemRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Add an inventory item"""
    command = AddItemCommand(**request.model_dump())
    result = await AddItemUseCase(uow).execute(command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/edit/{item_id}", status_code=status.HTTP_200_OK, response_model=ItemMutationResponse)
async def edit_item(
    item_id: UUID, request: EditItemRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Edit an inventory item

    Raises:
        - 404 Not Found: Unknown item
    """
    command = EditItemCommand(**request.model_dump(exclude_unset=True))
    result = await EditItemUseCase(uow).execute(item_id, command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.delete("/delete/{item_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_item(item_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete an inventory item

    Raises:
        - 404 Not Found: Unknown item
    """
    result = await DeleteItemUseCase(uow).execute(item_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value
