import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Keep bcrypt cheap in unit tests"""
    from config import ApplicationConfig

    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow
