"""Blog Service API client.

A thin wrapper around the REST API exposed by ``blog_service_api.app``.
The client uses the ``requests`` library and exposes one method per
endpoint.  Every method returns a tuple ``(data, error)``: on success
``data`` holds the decoded JSON response and ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with keys
``status_code``, ``error`` and ``message``.

Authenticated operations (create, update, delete, like, comment) need
a bearer token; pass it as ``api_key`` when constructing the client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class BlogServiceClient:
    """Client for interacting with the blog service."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_key: Optional bearer token.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is sent with
                every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the versioned API prefix (e.g. ``/blogs/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "error": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> ApiError:
        """Build the error dictionary for a non-2xx response."""
        response = exc.response
        status = response.status_code if response is not None else None
        kind = None
        message = ""
        if response is not None:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            if isinstance(detail, dict):
                kind = detail.get("error")
                message = detail.get("message") or ""
            elif detail:
                message = str(detail)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "error": kind, "message": message}

    # ------------------------------------------------------------------
    # Blog operations
    # ------------------------------------------------------------------
    def create_blog(
        self, *, title: str, content: str, tags: List[str], category: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a blog owned by the token's caller."""
        body = {"title": title, "content": content, "tags": tags, "category": category}
        return self._request("POST", "/blogs/", json_body=body)

    def update_blog(
        self, blog_id: str, *, title: str, content: str, tags: List[str], category: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        body = {"title": title, "content": content, "tags": tags, "category": category}
        return self._request("PUT", f"/blogs/{blog_id}", json_body=body)

    def get_all_blogs(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[ApiError]]:
        return self._request("GET", "/blogs/")

    def get_blog(self, blog_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/blogs/{blog_id}")

    def search_blogs_by_title_and_content(
        self, query: str
    ) -> Tuple[Optional[List[Dict[str, Any]]], Optional[ApiError]]:
        return self._request("GET", "/blogs/search/title-content", params={"q": query})

    def search_blogs_by_tags(self, query: str) -> Tuple[Optional[List[Dict[str, Any]]], Optional[ApiError]]:
        return self._request("GET", "/blogs/search/tags", params={"q": query})

    def search_blogs_by_category(
        self, query: str
    ) -> Tuple[Optional[List[Dict[str, Any]]], Optional[ApiError]]:
        return self._request("GET", "/blogs/search/category", params={"q": query})

    def like_blog(self, blog_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("POST", f"/blogs/{blog_id}/like")

    def comment_blog(self, blog_id: str, comment: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("POST", f"/blogs/{blog_id}/comments", json_body={"comment": comment})

    def get_blog_comments(self, blog_id: str) -> Tuple[Optional[List[str]], Optional[ApiError]]:
        return self._request("GET", f"/blogs/{blog_id}/comments")

    def delete_blog(self, blog_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Delete a blog and return the removed record."""
        return self._request("DELETE", f"/blogs/{blog_id}")

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/info/health")
