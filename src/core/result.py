"""Result types shared by every use case.

Use cases never raise for expected business failures. They return either
``Return.ok(value)`` or ``Return.err(Error(code, message))`` and the API layer
maps the error code to an HTTP status.

Usage:
    result = await use_case.execute(...)
    if result.is_err():
        raise ClientError(result.error)
    return result.value
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Business error with a machine-readable code and a user-facing message."""

    code: str
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Error] = None

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    """Constructors for Result values."""

    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
