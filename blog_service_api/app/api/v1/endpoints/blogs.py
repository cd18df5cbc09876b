"""
Blog endpoints for API v1.

These routes expose the blog operations of ``BlogService``.  Reading
and searching are public; creating, updating, deleting, liking and
commenting require a bearer token whose ``sub`` claim identifies the
caller.  Failed operations are returned as
``{"detail": {"error": <kind>, "message": <text>}}`` with a status code
chosen from the error kind.  Empty listings are reported as 404.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from blog_service_api.app.api.dependencies import get_blog_service, unwrap
from blog_service_api.app.core.security import get_current_caller
from blog_service_api.app.schemas.blog import Blog, BlogPayload, CommentPayload, ErrorDetail
from blog_service_api.app.services.blog_service import BlogService

router = APIRouter()

_errors = {
    400: {"model": ErrorDetail, "description": "Invalid payload"},
    403: {"model": ErrorDetail, "description": "Caller may not perform this action"},
    404: {"model": ErrorDetail, "description": "Blog not found or nothing matched"},
}


@router.post("/", response_model=Blog, status_code=status.HTTP_201_CREATED, responses=_errors)
async def create_blog(
    payload: BlogPayload,
    caller: str = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
) -> Blog:
    """Create a new blog owned by the authenticated caller."""
    return unwrap(service.create_blog(payload, caller))


@router.get("/", response_model=List[Blog], responses=_errors)
async def get_all_blogs(service: BlogService = Depends(get_blog_service)) -> List[Blog]:
    """Return all blogs ordered by id.  Returns 404 if there are none."""
    return unwrap(service.get_all_blogs())


@router.get("/search/title-content", response_model=List[Blog], responses=_errors)
async def search_blogs_by_title_and_content(
    q: str = Query(..., description="Case-insensitive text to look for in title or content"),
    service: BlogService = Depends(get_blog_service),
) -> List[Blog]:
    return unwrap(service.search_blogs_by_title_and_content(q))


@router.get("/search/tags", response_model=List[Blog], responses=_errors)
async def search_blogs_by_tags(
    q: str = Query(..., description="Tag to match; lower-cased before comparison"),
    service: BlogService = Depends(get_blog_service),
) -> List[Blog]:
    return unwrap(service.search_blogs_by_tags(q))


@router.get("/search/category", response_model=List[Blog], responses=_errors)
async def search_blogs_by_category(
    q: str = Query(..., description="Case-insensitive text to look for in the category"),
    service: BlogService = Depends(get_blog_service),
) -> List[Blog]:
    return unwrap(service.search_blogs_by_category(q))


@router.get("/{blog_id}", response_model=Blog, responses=_errors)
async def get_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> Blog:
    return unwrap(service.get_blog(blog_id))


@router.put("/{blog_id}", response_model=Blog, responses=_errors)
async def update_blog(
    blog_id: str,
    payload: BlogPayload,
    caller: str = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
) -> Blog:
    """Replace title, content, tags and category (owner only)."""
    return unwrap(service.update_blog(blog_id, payload, caller))


@router.delete("/{blog_id}", response_model=Blog, responses=_errors)
async def delete_blog(
    blog_id: str,
    caller: str = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
) -> Blog:
    """Delete a blog (owner only) and return the deleted record."""
    return unwrap(service.delete_blog(blog_id, caller))


@router.post("/{blog_id}/like", response_model=Blog, responses=_errors)
async def like_blog(
    blog_id: str,
    caller: str = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
) -> Blog:
    """Add one like.  Bloggers cannot like their own posts."""
    return unwrap(service.like_blog(blog_id, caller))


@router.post("/{blog_id}/comments", response_model=Blog, responses=_errors)
async def comment_blog(
    blog_id: str,
    payload: CommentPayload,
    caller: str = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
) -> Blog:
    return unwrap(service.comment_blog(blog_id, payload.comment, caller))


@router.get("/{blog_id}/comments", response_model=List[str], responses=_errors)
async def get_blog_comments(blog_id: str, service: BlogService = Depends(get_blog_service)) -> List[str]:
    """Return the comments of a blog in the order they were added."""
    return unwrap(service.get_blog_comments(blog_id))
