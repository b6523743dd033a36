"""
Item Request Use Cases

Submitting, listing and reviewing item requests.
"""

from .submit_requests_use_case import SubmitRequestsUseCase
from .list_requests_use_case import (
    ListUserRequestsUseCase,
    ListPendingRequestsUseCase,
    ListAllRequestsUseCase,
)
from .review_request_use_case import ReviewRequestUseCase
from .dtos import (
    RequestLine,
    SubmitRequestsCommand,
    SubmitRequestsResponse,
    ItemRequestResponse,
    UserRequestResponse,
    PendingRequestResponse,
    RequestSummaryResponse,
)

__all__ = [
    # Use Cases
    "SubmitRequestsUseCase",
    "ListUserRequestsUseCase",
    "ListPendingRequestsUseCase",
    "ListAllRequestsUseCase",
    "ReviewRequestUseCase",
    # DTOs
    "RequestLine",
    "SubmitRequestsCommand",
    "SubmitRequestsResponse",
    "ItemRequestResponse",
    "UserRequestResponse",
    "PendingRequestResponse",
    "RequestSummaryResponse",
]
