"""
Ordered key-value storage for blog records.

``BlogStore`` is the only persistent state of the service: a map from
blog id to ``Blog`` that supports insert/overwrite, point lookup, full
enumeration in key order and removal.  Two implementations are
provided:

* ``InMemoryBlogStore`` keeps records in a dict.  Tests create a fresh
  instance per test.
* ``SQLiteBlogStore`` keeps records in the ``blogs`` table created by
  ``core.db.init_db`` so they survive restarts.

Stores hand out copies.  Mutating a record returned by ``get`` or
``values`` has no effect until it is written back with ``put``.
"""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .db import get_cursor, get_database_path
from ..schemas.blog import Blog

logger = logging.getLogger(__name__)


class BlogStore(ABC):
    """Ordered map from blog id to ``Blog``."""

    @abstractmethod
    def put(self, blog_id: str, blog: Blog) -> None:
        """Insert or overwrite the record stored under ``blog_id``."""

    @abstractmethod
    def get(self, blog_id: str) -> Optional[Blog]:
        """Return the record stored under ``blog_id`` or ``None``."""

    @abstractmethod
    def values(self) -> List[Blog]:
        """Return a snapshot of all records ordered by id."""

    @abstractmethod
    def remove(self, blog_id: str) -> Optional[Blog]:
        """Delete ``blog_id`` if present and return the prior record."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __contains__(self, blog_id: object) -> bool:
        return isinstance(blog_id, str) and self.get(blog_id) is not None


class InMemoryBlogStore(BlogStore):
    """Dict-backed store; enumeration is sorted by key."""

    def __init__(self) -> None:
        self._blogs: Dict[str, Blog] = {}

    def put(self, blog_id: str, blog: Blog) -> None:
        self._blogs[blog_id] = blog.model_copy(deep=True)

    def get(self, blog_id: str) -> Optional[Blog]:
        blog = self._blogs.get(blog_id)
        return blog.model_copy(deep=True) if blog is not None else None

    def values(self) -> List[Blog]:
        return [self._blogs[key].model_copy(deep=True) for key in sorted(self._blogs)]

    def remove(self, blog_id: str) -> Optional[Blog]:
        return self._blogs.pop(blog_id, None)

    def __len__(self) -> int:
        return len(self._blogs)


class SQLiteBlogStore(BlogStore):
    """Store backed by the ``blogs`` table of a SQLite database.

    The schema must already exist; call ``core.db.init_db`` with the
    same path first.  ``db_path`` defaults to ``settings.database_url``.
    In-memory databases are rejected with ``ValueError``.
    """

    _COLUMNS = (
        "id, title, content, blogger, likes, tags, category, comments, updated_at, created_date"
    )

    def __init__(self, db_path: Optional[str] = None) -> None:
        # Resolve now so an unusable path fails at construction.
        self.db_path = get_database_path(db_path)

    def put(self, blog_id: str, blog: Blog) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"""
                INSERT OR REPLACE INTO blogs ({self._COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    blog_id,
                    blog.title,
                    blog.content,
                    blog.blogger,
                    blog.likes,
                    json.dumps(blog.tags),
                    blog.category,
                    json.dumps(blog.comments),
                    blog.updated_at,
                    blog.created_date,
                ),
            )
        logger.debug("Stored blog %s", blog_id)

    def get(self, blog_id: str) -> Optional[Blog]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {self._COLUMNS} FROM blogs WHERE id = ?",
                (blog_id,),
            ).fetchone()
        return self._row_to_blog(row) if row else None

    def values(self) -> List[Blog]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(f"SELECT {self._COLUMNS} FROM blogs ORDER BY id").fetchall()
        return [self._row_to_blog(row) for row in rows]

    def remove(self, blog_id: str) -> Optional[Blog]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {self._COLUMNS} FROM blogs WHERE id = ?",
                (blog_id,),
            ).fetchone()
            if not row:
                return None
            cursor.execute("DELETE FROM blogs WHERE id = ?", (blog_id,))
        logger.debug("Removed blog %s", blog_id)
        return self._row_to_blog(row)

    def __len__(self) -> int:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS total FROM blogs").fetchone()
        return int(row["total"])

    @staticmethod
    def _row_to_blog(row: sqlite3.Row) -> Blog:
        """Convert a database row to a ``Blog`` instance."""
        return Blog(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            blogger=row["blogger"],
            likes=row["likes"],
            tags=json.loads(row["tags"]),
            category=row["category"],
            comments=json.loads(row["comments"]),
            updated_at=row["updated_at"],
            created_date=row["created_date"],
        )
