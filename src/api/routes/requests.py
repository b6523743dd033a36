from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.requests import (
    ItemRequestResponse,
    ListAllRequestsUseCase,
    ListPendingRequestsUseCase,
    ListUserRequestsUseCase,
    PendingRequestResponse,
    RequestLine,
    RequestSummaryResponse,
    ReviewRequestUseCase,
    SubmitRequestsCommand,
    SubmitRequestsResponse,
    SubmitRequestsUseCase,
    UserRequestResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import RequestStatus

router = APIRouter(prefix="/requests", tags=["Requests"])


class SubmitRequestsRequest(BaseModel):
    """
    Submit requests HTTP request payload

    An empty list is accepted here and rejected by the use case with 400.
    """

    requests: List[RequestLine] = Field(default_factory=list)
    requested_by: str = Field(..., min_length=1, description="Requesting username")


def _raise_for(error):
    if error.code in ("NO_REQUESTS", "INVALID_REQUEST", "INVALID_DECISION"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code == "REQUEST_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SubmitRequestsResponse)
async def submit_requests(
    request: SubmitRequestsRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Submit one or more item requests

    Raises:
        - 400 Bad Request: No requests provided, bad item id or quantity
    """
    command = SubmitRequestsCommand(requests=request.requests, requested_by=request.requested_by)
    result = await SubmitRequestsUseCase(uow).execute(command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[RequestSummaryResponse])
async def list_all_requests(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All requests, newest first"""
    result = await ListAllRequestsUseCase(uow).execute()
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get(
    "/user/{username}", status_code=status.HTTP_200_OK, response_model=List[UserRequestResponse]
)
async def list_user_requests(username: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """A user's request history, newest first"""
    result = await ListUserRequestsUseCase(uow).execute(username)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/pending", status_code=status.HTTP_200_OK, response_model=List[PendingRequestResponse])
async def list_pending_requests(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Pending requests, newest first"""
    result = await ListPendingRequestsUseCase(uow).execute()
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/approve/{request_id}", status_code=status.HTTP_200_OK, response_model=ItemRequestResponse)
async def approve_request(request_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Approve a request

    Raises:
        - 404 Not Found: Unknown request
    """
    result = await ReviewRequestUseCase(uow).execute(request_id, RequestStatus.approved)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/reject/{request_id}", status_code=status.HTTP_200_OK, response_model=ItemRequestResponse)
async def reject_request(request_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Reject a request

    Raises:
        - 404 Not Found: Unknown request
    """
    result = await ReviewRequestUseCase(uow).execute(request_id, RequestStatus.rejected)
    if result.is_err():
        _raise_for(result.error)
    return result.value
