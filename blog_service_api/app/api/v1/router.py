"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import blogs, info

router = APIRouter()

router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
router.include_router(info.router, prefix="/info", tags=["info"])
