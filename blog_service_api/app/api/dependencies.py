"""
Shared FastAPI dependencies and result-to-HTTP mapping.
"""

from typing import Dict, TypeVar

from fastapi import HTTPException, Request, status

from ..core.result import Err, ErrorKind, Result
from ..services.blog_service import BlogService

T = TypeVar("T")

ERROR_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.EMPTY_RESULT: status.HTTP_404_NOT_FOUND,
    ErrorKind.CREATION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORAGE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_blog_service(request: Request) -> BlogService:
    """Return the ``BlogService`` attached to the application by ``create_app``."""
    return request.app.state.blog_service


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` result or raise the matching ``HTTPException``."""
    if isinstance(result, Err):
        raise HTTPException(
            status_code=ERROR_STATUS[result.kind],
            detail={"error": result.kind.value, "message": result.message},
        )
    return result.value
