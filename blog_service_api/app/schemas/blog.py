"""
Pydantic models for blog data.

``Blog`` is the stored record and the response body of most
endpoints.  ``BlogPayload`` carries the editable fields for create and
update requests.  Its fields are optional at the schema level on
purpose: a missing or empty field is reported by ``BlogService`` as an
``InvalidInput`` result rather than a request validation error.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Blog(BaseModel):
    """A stored blog post."""

    id: str
    title: str = Field(..., examples=["Getting started with FastAPI"])
    content: str
    blogger: str = Field(..., description="Identity token of the caller who created the blog")
    likes: int = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list, examples=[["python", "web"]])
    category: str = Field(..., examples=["Tech"])
    comments: List[str] = Field(default_factory=list)
    updated_at: Optional[int] = Field(
        None, description="Nanoseconds since the epoch of the last update; null if never updated"
    )
    created_date: int = Field(..., description="Nanoseconds since the epoch at creation")

    model_config = {
        "from_attributes": True,
    }


class BlogPayload(BaseModel):
    """Editable blog fields sent on create and update."""

    title: Optional[str] = Field(None, examples=["Getting started with FastAPI"])
    content: Optional[str] = None
    tags: Optional[List[str]] = Field(None, examples=[["python", "web"]])
    category: Optional[str] = Field(None, examples=["Tech"])

    def is_complete(self) -> bool:
        """Return ``True`` when every field is present and non-empty."""
        return bool(self.title and self.content and self.tags and self.category)


class CommentPayload(BaseModel):
    """Body of a comment request.  The text is stored verbatim."""

    comment: str = Field(..., examples=["Great post!"])


class ErrorDetail(BaseModel):
    """Error body returned for a failed operation."""

    error: str = Field(..., examples=["NotFound"])
    message: str = Field(..., examples=["Blog not found for id: 42"])
