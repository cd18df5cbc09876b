"""
Information endpoint for API v1.

Reports service status together with the number of stored blogs so
that deployments can check both the process and its storage.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from blog_service_api.app.api.dependencies import get_blog_service
from blog_service_api.app.core.config import settings
from blog_service_api.app.services.blog_service import BlogService

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(service: BlogService = Depends(get_blog_service)) -> Dict[str, Any]:
    """Health check endpoint - returns service status."""
    return {
        "status": "ok",
        "service": settings.project_name,
        "version": settings.api_version,
        "blogs": len(service.store),
    }
