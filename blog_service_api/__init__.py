"""
Top‑level package for the Blog Service API.

This file makes ``blog_service_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``blog_service_api.app.main``.  The HTTP client for the service lives
in ``blog_service_api.client``.
"""

__all__ = []
