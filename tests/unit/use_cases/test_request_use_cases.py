"""
Unit tests for item request use cases
"""
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.requests import (
    ListAllRequestsUseCase,
    ListPendingRequestsUseCase,
    ListUserRequestsUseCase,
    RequestLine,
    ReviewRequestUseCase,
    SubmitRequestsCommand,
    SubmitRequestsUseCase,
)
from src.domain.entities import InventoryItem, ItemRequest, RequestStatus


@pytest.fixture
def item():
    return InventoryItem(id=uuid4(), name="Arduino Uno", location="A1", quantity=12)


@pytest.fixture
def item_request(item):
    return ItemRequest(
        id=uuid4(),
        item_id=item.id,
        quantity=2,
        requested_by="alex",
        status=RequestStatus.pending,
        requested_at=datetime(2026, 10, 19, 9, 30),
    )


@pytest.fixture
def uow(mock_uow, item, item_request):
    async def passthrough(value):
        return value

    mock_uow.item_requests = MagicMock()
    mock_uow.item_requests.create = AsyncMock(side_effect=passthrough)
    mock_uow.item_requests.update = AsyncMock(side_effect=passthrough)
    mock_uow.item_requests.get_by_id = AsyncMock(return_value=item_request)
    mock_uow.item_requests.list_with_items = AsyncMock(return_value=[(item_request, item)])
    return mock_uow


@pytest.mark.asyncio
async def test_submit_requests(uow, item):
    command = SubmitRequestsCommand(
        requests=[
            RequestLine(item_id=str(item.id), quantity=2),
            RequestLine(item_id=str(uuid4()), quantity=1),
        ],
        requested_by="alex",
    )

    result = await SubmitRequestsUseCase(uow).execute(command)

    assert result.is_ok()
    assert result.value.message == "Requests submitted successfully"
    assert len(result.value.data) == 2
    assert all(r.status == "pending" for r in result.value.data)
    assert all(r.requested_by == "alex" for r in result.value.data)
    assert uow.item_requests.create.call_count == 2
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_submit_no_requests(uow):
    result = await SubmitRequestsUseCase(uow).execute(SubmitRequestsCommand(requests=[], requested_by="alex"))

    assert result.is_err()
    assert result.error.code == "NO_REQUESTS"
    assert result.error.message == "No requests provided"
    uow.item_requests.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("line", [RequestLine(item_id="not-a-uuid", quantity=1), RequestLine(item_id=str(uuid4()), quantity=0)])
async def test_submit_invalid_line_creates_nothing(uow, line):
    command = SubmitRequestsCommand(requests=[line], requested_by="alex")

    result = await SubmitRequestsUseCase(uow).execute(command)

    assert result.is_err()
    assert result.error.code == "INVALID_REQUEST"
    uow.item_requests.create.assert_not_called()


@pytest.mark.asyncio
async def test_list_user_requests(uow, item, item_request):
    result = await ListUserRequestsUseCase(uow).execute("alex")

    assert result.is_ok()
    [row] = result.value
    assert row.id == str(item_request.id)
    assert row.item.name == "Arduino Uno"
    assert row.item.quantity == 12
    uow.item_requests.list_with_items.assert_called_once_with(requested_by="alex")


@pytest.mark.asyncio
async def test_list_pending_requests_with_missing_item(uow, item_request):
    uow.item_requests.list_with_items.return_value = [(item_request, None)]

    result = await ListPendingRequestsUseCase(uow).execute()

    assert result.is_ok()
    assert result.value[0].item_name == "Unknown Item"
    uow.item_requests.list_with_items.assert_called_once_with(status=RequestStatus.pending)


@pytest.mark.asyncio
async def test_list_all_requests(uow, item_request):
    uow.item_requests.list_with_items.return_value = [(item_request, None)]

    result = await ListAllRequestsUseCase(uow).execute()

    assert result.is_ok()
    row = result.value[0]
    assert row.item_name == "Unknown"
    assert row.status == "pending"
    assert row.note == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("decision", [RequestStatus.approved, RequestStatus.rejected])
async def test_review_request(uow, item_request, decision):
    result = await ReviewRequestUseCase(uow).execute(item_request.id, decision)

    assert result.is_ok()
    assert result.value.status == decision.value
    assert item_request.status == decision
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_review_cannot_reset_to_pending(uow, item_request):
    result = await ReviewRequestUseCase(uow).execute(item_request.id, RequestStatus.pending)

    assert result.is_err()
    assert result.error.code == "INVALID_DECISION"


@pytest.mark.asyncio
async def test_review_unknown_request(uow):
    uow.item_requests.get_by_id.return_value = None

    result = await ReviewRequestUseCase(uow).execute(uuid4(), RequestStatus.approved)

    assert result.is_err()
    assert result.error.code == "REQUEST_NOT_FOUND"
    uow.commit.assert_not_called()
