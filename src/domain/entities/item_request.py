"""
ItemRequest Entity

A request for a quantity of an inventory item.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import RequestStatus


class ItemRequest(SQLModel, table=True):
    """
    ItemRequest entity - a quantity of an item requested by a user.

    Business Rules:
    - Created as pending; a manager approves or rejects it
    - requested_by holds the requester's username
    """

    __tablename__ = "item_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    # No FK constraint: deleting an item keeps its request history
    item_id: UUID = Field(index=True)
    quantity: int

    status: RequestStatus = Field(default=RequestStatus.pending)
    requested_by: str = Field(index=True, max_length=150)
    note: Optional[str] = None

    requested_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_item_request_status", "status"),)
