"""
Business logic for blogs.

``BlogService`` validates input, applies ownership rules and reads and
writes a ``BlogStore``.  Every operation returns a ``Result``: ``Ok``
with the record (or list) on success, ``Err`` with an ``ErrorKind`` and
a human‑readable message otherwise.  Nothing is raised to the caller:
a store fault during creation is ``CREATION_FAILED`` and during any
other operation ``STORAGE_FAILED``, logged with its traceback.

Rules enforced here:

* title, content, tags and category must be non-empty on create and update;
* only the blogger who created a post may update or delete it;
* a blogger may not like their own post;
* anyone may comment;
* list, search and comment reads report ``EMPTY_RESULT`` instead of an
  empty list.

Each operation is a single read‑modify‑write against the store and is
serialised by a lock, so concurrent requests cannot observe each
other's partial updates.
"""

import functools
import logging
import threading
from typing import Callable, List, Optional

from ..core.blog_store import BlogStore
from ..core.providers import new_id, now_ns
from ..core.result import Err, ErrorKind, Ok, Result
from ..schemas.blog import Blog, BlogPayload

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid payload input"
NO_BLOGS_FOUND = "No blogs found, please add them first"


def _not_found(blog_id: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, f"Blog not found for id: {blog_id}")


def _reports_store_faults(operation):
    """Turn an exception raised by the store into a ``STORAGE_FAILED`` result."""

    @functools.wraps(operation)
    def wrapper(self, *args, **kwargs):
        try:
            return operation(self, *args, **kwargs)
        except Exception:
            logger.exception("Blog store failed during %s%r", operation.__name__, args)
            return Err(ErrorKind.STORAGE_FAILED, f"Blog storage is unavailable, {operation.__name__} failed")

    return wrapper


class BlogService:
    """Service for creating, querying and modifying blog posts."""

    def __init__(
        self,
        store: BlogStore,
        id_generator: Callable[[], str] = new_id,
        clock: Callable[[], int] = now_ns,
    ) -> None:
        self.store = store
        self.id_generator = id_generator
        self.clock = clock
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Create / update
    # ------------------------------------------------------------------
    def create_blog(self, payload: BlogPayload, caller: str) -> Result[Blog]:
        """Create a new blog owned by ``caller``.

        The new record gets a fresh id, zero likes, no comments, no
        ``updated_at`` and ``created_date`` set to the current time.
        A failing id generator, an id that is already taken or a store
        error yields ``CREATION_FAILED``.
        """
        if not payload.is_complete():
            return Err(ErrorKind.INVALID_INPUT, INVALID_PAYLOAD)

        with self._lock:
            try:
                blog_id = self.id_generator()
                if blog_id in self.store:
                    raise ValueError(f"generated id {blog_id} is already in use")
                blog = Blog(
                    id=blog_id,
                    title=payload.title,
                    content=payload.content,
                    blogger=caller,
                    likes=0,
                    tags=list(payload.tags),
                    category=payload.category,
                    comments=[],
                    updated_at=None,
                    created_date=self.clock(),
                )
                self.store.put(blog.id, blog)
            except Exception:
                logger.exception("Could not create blog '%s' for %s", payload.title, caller)
                return Err(ErrorKind.CREATION_FAILED, f"Could not create blog title: {payload.title}")

        logger.info("User %s created blog %s", caller, blog.id)
        return Ok(blog)

    @_reports_store_faults
    def update_blog(self, blog_id: str, payload: BlogPayload, caller: str) -> Result[Blog]:
        """Replace the editable fields of a blog owned by ``caller``.

        ``id``, ``blogger``, ``likes``, ``comments`` and ``created_date``
        are preserved; ``updated_at`` is set to the current time.
        """
        if not payload.is_complete():
            return Err(ErrorKind.INVALID_INPUT, INVALID_PAYLOAD)

        with self._lock:
            blog = self.store.get(blog_id)
            if blog is None:
                return _not_found(blog_id)
            if caller != blog.blogger:
                logger.warning("User %s attempted to update blog %s owned by %s", caller, blog_id, blog.blogger)
                return Err(ErrorKind.UNAUTHORIZED, "Unauthorized, only the blog owner can update the blog")

            blog.title = payload.title
            blog.content = payload.content
            blog.tags = list(payload.tags)
            blog.category = payload.category
            blog.updated_at = self.clock()
            self.store.put(blog.id, blog)

        logger.info("User %s updated blog %s", caller, blog_id)
        return Ok(blog)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @_reports_store_faults
    def get_all_blogs(self) -> Result[List[Blog]]:
        """Return every stored blog in store order."""
        blogs = self.store.values()
        if not blogs:
            return Err(ErrorKind.EMPTY_RESULT, NO_BLOGS_FOUND)
        return Ok(blogs)

    @_reports_store_faults
    def get_blog(self, blog_id: str) -> Result[Blog]:
        blog = self.store.get(blog_id)
        if blog is None:
            return _not_found(blog_id)
        return Ok(blog)

    def search_blogs_by_title_and_content(self, query: str) -> Result[List[Blog]]:
        """Case-insensitive substring match on title or content."""
        needle = query.lower()
        return self._filter(
            lambda blog: needle in blog.title.lower() or needle in blog.content.lower()
        )

    def search_blogs_by_tags(self, query: str) -> Result[List[Blog]]:
        """Exact match of the lower-cased query against the stored tags.

        Stored tags are compared as written, so a tag saved with
        upper-case letters is never matched.
        """
        needle = query.lower()
        return self._filter(lambda blog: needle in blog.tags)

    def search_blogs_by_category(self, query: str) -> Result[List[Blog]]:
        """Case-insensitive substring match on category."""
        needle = query.lower()
        return self._filter(lambda blog: needle in blog.category.lower())

    @_reports_store_faults
    def _filter(self, predicate: Callable[[Blog], bool]) -> Result[List[Blog]]:
        matches = [blog for blog in self.store.values() if predicate(blog)]
        if not matches:
            return Err(ErrorKind.EMPTY_RESULT, NO_BLOGS_FOUND)
        return Ok(matches)

    # ------------------------------------------------------------------
    # Likes and comments
    # ------------------------------------------------------------------
    @_reports_store_faults
    def like_blog(self, blog_id: str, caller: str) -> Result[Blog]:
        """Add one like from ``caller``.  Bloggers cannot like their own posts."""
        with self._lock:
            blog = self.store.get(blog_id)
            if blog is None:
                return _not_found(blog_id)
            if caller == blog.blogger:
                return Err(ErrorKind.FORBIDDEN, "not allowed, you cannot like your own blog")

            blog.likes += 1
            self.store.put(blog.id, blog)

        logger.debug("User %s liked blog %s (%d likes)", caller, blog_id, blog.likes)
        return Ok(blog)

    @_reports_store_faults
    def comment_blog(self, blog_id: str, comment: str, caller: Optional[str] = None) -> Result[Blog]:
        """Append ``comment`` verbatim to the blog's comments."""
        with self._lock:
            blog = self.store.get(blog_id)
            if blog is None:
                return _not_found(blog_id)

            blog.comments.append(comment)
            self.store.put(blog.id, blog)

        logger.debug("User %s commented on blog %s", caller, blog_id)
        return Ok(blog)

    @_reports_store_faults
    def get_blog_comments(self, blog_id: str) -> Result[List[str]]:
        blog = self.store.get(blog_id)
        if blog is None:
            return _not_found(blog_id)
        if not blog.comments:
            return Err(ErrorKind.EMPTY_RESULT, f"No comments found for blog id: {blog_id}")
        return Ok(blog.comments)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------
    @_reports_store_faults
    def delete_blog(self, blog_id: str, caller: str) -> Result[Blog]:
        """Remove a blog owned by ``caller`` and return the removed record."""
        with self._lock:
            blog = self.store.get(blog_id)
            if blog is None:
                return _not_found(blog_id)
            if caller != blog.blogger:
                logger.warning("User %s attempted to delete blog %s owned by %s", caller, blog_id, blog.blogger)
                return Err(ErrorKind.UNAUTHORIZED, "Unauthorized, only the blog owner can delete the blog")

            self.store.remove(blog_id)

        logger.info("User %s deleted blog %s", caller, blog_id)
        return Ok(blog)
