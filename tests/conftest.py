"""Shared fixtures for blog service tests."""

from __future__ import annotations

import itertools

import pytest
from fastapi.testclient import TestClient

from blog_service_api.app.core.blog_store import InMemoryBlogStore
from blog_service_api.app.core.security import create_access_token
from blog_service_api.app.main import create_app
from blog_service_api.app.schemas.blog import BlogPayload
from blog_service_api.app.services.blog_service import BlogService


OWNER = "alice"
OTHER = "bob"


class SequentialIds:
    """Deterministic id generator: blog-0001, blog-0002, ..."""

    def __init__(self):
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"blog-{next(self._counter):04d}"


class TickingClock:
    """Clock that advances by one second on every reading."""

    def __init__(self, start: int = 1_700_000_000_000_000_000, step: int = 1_000_000_000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def store():
    """A fresh, empty in-memory store."""
    return InMemoryBlogStore()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def service(store, clock):
    """BlogService over the in-memory store with deterministic ids and time."""
    return BlogService(store, id_generator=SequentialIds(), clock=clock)


@pytest.fixture
def payload():
    return BlogPayload(title="T", content="C", tags=["x"], category="Tech")


@pytest.fixture
def client(service):
    """TestClient for an app wired to the test service."""
    return TestClient(create_app(service=service))


@pytest.fixture
def owner_headers():
    return {"Authorization": f"Bearer {create_access_token({'sub': OWNER})}"}


@pytest.fixture
def other_headers():
    return {"Authorization": f"Bearer {create_access_token({'sub': OTHER})}"}
