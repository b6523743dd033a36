"""
Review Request Use Case

Approves or rejects an item request.
"""

from uuid import UUID

from src.core.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import RequestStatus
from .dtos import ItemRequestResponse


class ReviewRequestUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, request_id: UUID, decision: RequestStatus) -> Result[ItemRequestResponse]:
        """
        Set the status of a request to approved or rejected.

        Errors:
            - INVALID_DECISION: decision is not approved/rejected
            - REQUEST_NOT_FOUND: no request with this id
        """
        if decision not in (RequestStatus.approved, RequestStatus.rejected):
            return Return.err(Error("INVALID_DECISION", "Requests can only be approved or rejected"))

        async with self.uow:
            item_request = await self.uow.item_requests.get_by_id(request_id)
            if item_request is None:
                return Return.err(Error("REQUEST_NOT_FOUND", "Request not found"))

            item_request.status = decision
            item_request = await self.uow.item_requests.update(item_request)

            await self.uow.commit()

            return Return.ok(ItemRequestResponse.from_entity(item_request))
