"""JSON API root. Everything lives under ``/api``; ``/sitemap.xml`` is mounted separately."""

from fastapi import APIRouter

from blog_api.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
