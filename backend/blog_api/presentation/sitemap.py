"""``/sitemap.xml``, served at the site root outside the versioned API."""

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from blog_api.application.services import SitemapService
from blog_api.domain.exceptions import StoreError
from blog_api.infrastructure.dependencies import get_sitemap_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["SEO"])


@router.get("/sitemap.xml", response_class=Response)
async def sitemap(
    service: SitemapService = Depends(get_sitemap_service),
) -> Response:
    """Sitemap protocol document listing static pages and every blog article."""
    try:
        xml = await service.build_sitemap()
    except StoreError:
        logger.error("Sitemap generation failed")
        return PlainTextResponse("Error generating sitemap", status_code=500)
    return Response(content=xml, media_type="application/xml")
