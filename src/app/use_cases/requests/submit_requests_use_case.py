"""
Submit Requests Use Case

Records a batch of item requests for one user.
"""

from uuid import UUID

from src.core.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ItemRequest, RequestStatus
from .dtos import ItemRequestResponse, SubmitRequestsCommand, SubmitRequestsResponse


class SubmitRequestsUseCase:
    """
    Use case for submitting item requests.

    Business Rules:
    - At least one request line is required
    - Every line must reference a valid item id and a positive quantity
    - All lines are created as pending and committed together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SubmitRequestsCommand) -> Result[SubmitRequestsResponse]:
        if not command.requests:
            return Return.err(Error("NO_REQUESTS", "No requests provided"))

        lines = []
        for line in command.requests:
            try:
                item_id = UUID(line.item_id)
            except ValueError:
                return Return.err(Error("INVALID_REQUEST", f"Invalid item id: {line.item_id}"))
            if line.quantity <= 0:
                return Return.err(Error("INVALID_REQUEST", "Quantity must be positive"))
            lines.append((item_id, line.quantity))

        async with self.uow:
            saved = []
            for item_id, quantity in lines:
                item_request = ItemRequest(
                    item_id=item_id,
                    quantity=quantity,
                    status=RequestStatus.pending,
                    requested_by=command.requested_by,
                )
                saved.append(await self.uow.item_requests.create(item_request))

            await self.uow.commit()

            return Return.ok(
                SubmitRequestsResponse(
                    message="Requests submitted successfully",
                    data=[ItemRequestResponse.from_entity(r) for r in saved],
                )
            )
