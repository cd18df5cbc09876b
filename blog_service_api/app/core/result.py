"""
Result values returned by service operations.

Every ``BlogService`` operation returns either ``Ok(value)`` or
``Err(kind, message)`` instead of raising.  The API layer inspects the
error kind to choose an HTTP status code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union


T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a service operation can report."""

    INVALID_INPUT = "InvalidInput"
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    EMPTY_RESULT = "EmptyResult"
    CREATION_FAILED = "CreationFailed"
    STORAGE_FAILED = "StorageFailed"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
