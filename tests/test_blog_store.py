"""Tests for the in-memory and SQLite blog stores.

Both implementations must behave as the same ordered map, so most
tests run against each of them through a parametrized fixture.
"""

from __future__ import annotations

import pytest

from blog_service_api.app.core.blog_store import InMemoryBlogStore, SQLiteBlogStore
from blog_service_api.app.core.db import MIGRATIONS, get_cursor, init_db
from blog_service_api.app.schemas.blog import Blog


def make_blog(blog_id: str, **overrides) -> Blog:
    fields = dict(
        id=blog_id,
        title=f"Title {blog_id}",
        content="Body",
        blogger="alice",
        likes=0,
        tags=["python", "Web"],
        category="Tech",
        comments=[],
        updated_at=None,
        created_date=1_700_000_000_000_000_000,
    )
    fields.update(overrides)
    return Blog(**fields)


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return InMemoryBlogStore()
    db_path = str(tmp_path / "blogs.db")
    init_db(db_path)
    return SQLiteBlogStore(db_path)


class TestBlogStore:
    """Behaviour shared by every BlogStore implementation."""

    def test_get_missing_returns_none(self, any_store):
        assert any_store.get("nope") is None
        assert "nope" not in any_store

    def test_put_then_get_round_trips_record(self, any_store):
        blog = make_blog("a", comments=["first", ""], updated_at=1_700_000_000_500_000_000, likes=3)

        any_store.put(blog.id, blog)

        assert any_store.get("a") == blog
        assert "a" in any_store

    def test_put_overwrites_existing_record(self, any_store):
        any_store.put("a", make_blog("a"))
        any_store.put("a", make_blog("a", title="Changed", likes=7))

        stored = any_store.get("a")
        assert stored.title == "Changed"
        assert stored.likes == 7
        assert len(any_store) == 1

    def test_values_are_ordered_by_id(self, any_store):
        for blog_id in ["c", "a", "b"]:
            any_store.put(blog_id, make_blog(blog_id))

        assert [blog.id for blog in any_store.values()] == ["a", "b", "c"]

    def test_values_on_empty_store(self, any_store):
        assert any_store.values() == []
        assert len(any_store) == 0

    def test_remove_returns_prior_record(self, any_store):
        blog = make_blog("a")
        any_store.put("a", blog)

        removed = any_store.remove("a")

        assert removed == blog
        assert any_store.get("a") is None
        assert len(any_store) == 0

    def test_remove_missing_is_noop(self, any_store):
        any_store.put("a", make_blog("a"))

        assert any_store.remove("missing") is None
        assert len(any_store) == 1

    def test_returned_records_are_copies(self, any_store):
        any_store.put("a", make_blog("a"))

        fetched = any_store.get("a")
        fetched.comments.append("not saved")
        fetched.likes = 99

        stored = any_store.get("a")
        assert stored.comments == []
        assert stored.likes == 0


class TestSQLiteBlogStore:
    """Persistence-specific behaviour."""

    def test_records_survive_new_store_instance(self, tmp_path):
        db_path = str(tmp_path / "blogs.db")
        init_db(db_path)
        SQLiteBlogStore(db_path).put("a", make_blog("a", tags=["Mixed", "case"]))

        reopened = SQLiteBlogStore(db_path)

        assert reopened.get("a").tags == ["Mixed", "case"]

    def test_init_db_is_idempotent(self, tmp_path):
        db_path = str(tmp_path / "blogs.db")
        latest = MIGRATIONS[-1][0]

        assert init_db(db_path) == latest
        assert init_db(db_path) == latest

        with get_cursor(db_path) as cursor:
            versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
        assert versions == [version for version, _ in MIGRATIONS]

    def test_schema_has_no_secondary_indexes(self, tmp_path):
        db_path = str(tmp_path / "blogs.db")
        init_db(db_path)

        with get_cursor(db_path) as cursor:
            indexes = [
                row["name"]
                for row in cursor.execute(
                    "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = 'blogs'"
                )
            ]

        assert all(name.startswith("sqlite_autoindex_") for name in indexes)

    @pytest.mark.parametrize("db_url", [":memory:", "file::memory:?cache=shared"])
    def test_in_memory_database_is_rejected(self, db_url):
        with pytest.raises(ValueError, match="InMemoryBlogStore"):
            SQLiteBlogStore(db_url)

        with pytest.raises(ValueError):
            init_db(db_url)
