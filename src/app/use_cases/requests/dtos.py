"""
Item Request Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the item request domain.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from src.domain.entities import ItemRequest


# ============================================================================
# Command DTOs
# ============================================================================


class RequestLine(BaseModel):
    """One requested item and quantity"""

    item_id: str
    quantity: int


class SubmitRequestsCommand(BaseModel):
    requests: List[RequestLine]
    requested_by: str


# ============================================================================
# Response DTOs
# ============================================================================


class ItemRequestResponse(BaseModel):
    """Item request as stored"""

    id: str
    item_id: str
    quantity: int
    status: str
    requested_by: str
    note: Optional[str] = None
    requested_at: datetime

    @classmethod
    def from_entity(cls, item_request: ItemRequest) -> "ItemRequestResponse":
        return cls(
            id=str(item_request.id),
            item_id=str(item_request.item_id),
            quantity=item_request.quantity,
            status=item_request.status.value,
            requested_by=item_request.requested_by,
            note=item_request.note,
            requested_at=item_request.requested_at,
        )


class SubmitRequestsResponse(BaseModel):
    message: str
    data: List[ItemRequestResponse]


class RequestedItem(BaseModel):
    """Inventory item summary embedded in a user's request history"""

    id: str
    name: str
    quantity: int


class UserRequestResponse(BaseModel):
    """Request in a user's own history"""

    id: str
    item: Optional[RequestedItem] = None
    quantity: int
    status: str
    note: Optional[str] = None
    requested_at: datetime


class PendingRequestResponse(BaseModel):
    """Request awaiting review"""

    id: str
    item_name: str
    quantity: int
    requested_by: str
    requested_at: datetime


class RequestSummaryResponse(BaseModel):
    """Request in the full overview"""

    id: str
    item_name: str
    quantity: int
    requested_by: str
    status: str
    note: str
    requested_at: datetime
