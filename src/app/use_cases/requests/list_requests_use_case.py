"""
List Requests Use Cases

Read-only views over item requests, newest first.
"""

from typing import List

from src.core.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import RequestStatus
from .dtos import (
    PendingRequestResponse,
    RequestedItem,
    RequestSummaryResponse,
    UserRequestResponse,
)


class ListUserRequestsUseCase:
    """A user's own request history with the requested item"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str) -> Result[List[UserRequestResponse]]:
        async with self.uow:
            rows = await self.uow.item_requests.list_with_items(requested_by=username)

            return Return.ok(
                [
                    UserRequestResponse(
                        id=str(item_request.id),
                        item=(
                            RequestedItem(id=str(item.id), name=item.name, quantity=item.quantity)
                            if item is not None
                            else None
                        ),
                        quantity=item_request.quantity,
                        status=item_request.status.value,
                        note=item_request.note,
                        requested_at=item_request.requested_at,
                    )
                    for item_request, item in rows
                ]
            )


class ListPendingRequestsUseCase:
    """Requests waiting for a manager's decision"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[PendingRequestResponse]]:
        async with self.uow:
            rows = await self.uow.item_requests.list_with_items(status=RequestStatus.pending)

            return Return.ok(
                [
                    PendingRequestResponse(
                        id=str(item_request.id),
                        item_name=item.name if item is not None else "Unknown Item",
                        quantity=item_request.quantity,
                        requested_by=item_request.requested_by,
                        requested_at=item_request.requested_at,
                    )
                    for item_request, item in rows
                ]
            )


class ListAllRequestsUseCase:
    """Every request regardless of status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[RequestSummaryResponse]]:
        async with self.uow:
            rows = await self.uow.item_requests.list_with_items()

            return Return.ok(
                [
                    RequestSummaryResponse(
                        id=str(item_request.id),
                        item_name=item.name if item is not None else "Unknown",
                        quantity=item_request.quantity,
                        requested_by=item_request.requested_by,
                        status=item_request.status.value,
                        note=item_request.note or "",
                        requested_at=item_request.requested_at,
                    )
                    for item_request, item in rows
                ]
            )
