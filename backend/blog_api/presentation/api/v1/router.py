"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from blog_api.presentation.api.v1.endpoints.health import router as health_router
from blog_api.presentation.api.v1.endpoints.blogs import router as blogs_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(blogs_router)
