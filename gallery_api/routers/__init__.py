"""
API routers package.
"""
from gallery_api.routers.auth import router as auth_router
from gallery_api.routers.comments import router as comments_router
from gallery_api.routers.gallery import router as gallery_router
from gallery_api.routers.health import router as health_router
from gallery_api.routers.projects import router as projects_router

__all__ = [
    "auth_router",
    "comments_router",
    "gallery_router",
    "health_router",
    "projects_router",
]
