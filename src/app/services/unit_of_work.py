from abc import ABC, abstractmethod

from src.app.repositories.inventory_item_repository import IInventoryItemRepository
from src.app.repositories.item_request_repository import IItemRequestRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    inventory_items: IInventoryItemRepository
    item_requests: IItemRequestRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
