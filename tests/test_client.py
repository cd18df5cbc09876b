"""Tests for BlogServiceClient against a mocked requests session."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from blog_service_api.client import BlogServiceClient


def make_response(status_code: int, json_data=None) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"{}" if json_data is not None else b""
    response.json.return_value = json_data
    response.text = ""
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return BlogServiceClient(base_url="http://blog.test/", api_key="token-123", session=session)


class TestBlogServiceClient:
    def test_create_blog_posts_payload_with_bearer_token(self, api, session):
        session.request.return_value = make_response(201, {"id": "blog-1"})

        data, error = api.create_blog(title="T", content="C", tags=["x"], category="Tech")

        assert error is None
        assert data == {"id": "blog-1"}
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://blog.test/api/v1/blogs/"
        assert kwargs["json"] == {"title": "T", "content": "C", "tags": ["x"], "category": "Tech"}
        assert kwargs["headers"] == {"Authorization": "Bearer token-123"}

    def test_search_sends_query_parameter(self, api, session):
        session.request.return_value = make_response(200, [])

        api.search_blogs_by_category("tech")

        kwargs = session.request.call_args.kwargs
        assert kwargs["url"] == "http://blog.test/api/v1/blogs/search/category"
        assert kwargs["params"] == {"q": "tech"}

    def test_service_error_is_returned_as_error_dict(self, api, session):
        detail = {"detail": {"error": "NotFound", "message": "Blog not found for id: x"}}
        session.request.return_value = make_response(404, detail)

        data, error = api.get_blog("x")

        assert data is None
        assert error == {"status_code": 404, "error": "NotFound", "message": "Blog not found for id: x"}

    def test_plain_http_error_detail(self, api, session):
        session.request.return_value = make_response(401, {"detail": "Not authenticated"})

        _, error = api.like_blog("blog-1")

        assert error == {"status_code": 401, "error": None, "message": "Not authenticated"}

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")

        data, error = api.get_all_blogs()

        assert data is None
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_no_token_sends_no_authorization_header(self, session):
        session.request.return_value = make_response(200, ["a"])
        api = BlogServiceClient(base_url="http://blog.test", session=session)

        data, _ = api.get_blog_comments("blog-1")

        assert data == ["a"]
        assert session.request.call_args.kwargs["headers"] == {}
