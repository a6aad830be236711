"""Sitemap synthesis: the crawlable URLs of the marketing site plus every blog article."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import quote

from lxml import etree

from blog_api.application.interfaces import ArticleRepository

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class StaticRoute:
    """A fixed page of the site and its crawl priority."""

    path: str
    priority: float


STATIC_ROUTES: tuple[StaticRoute, ...] = (
    StaticRoute("/", 1.0),
    StaticRoute("/about", 0.8),
    StaticRoute("/services", 0.9),
    StaticRoute("/menu", 0.8),
    StaticRoute("/events/weddings", 0.8),
    StaticRoute("/events/corporate", 0.8),
    StaticRoute("/events/private-parties", 0.8),
    StaticRoute("/contact", 0.7),
    StaticRoute("/blog", 0.9),
)


class SitemapService:
    """Builds the ``sitemap.xml`` document from the article store."""

    def __init__(
        self,
        repository: ArticleRepository,
        base_url: str,
        article_priority: float = 0.85,
        static_routes: tuple[StaticRoute, ...] = STATIC_ROUTES,
    ):
        self._repository = repository
        self._base_url = base_url.rstrip("/")
        self._article_priority = article_priority
        self._static_routes = static_routes

    async def build_sitemap(self) -> str:
        articles = await self._repository.get_all()

        urlset = etree.Element(_qualified("urlset"), nsmap={None: SITEMAP_NAMESPACE})
        for route in self._static_routes:
            self._add_url(urlset, self._absolute(route.path), route.priority)

        emitted = 0
        for article in articles:
            if not article.slug:
                continue
            self._add_url(
                urlset,
                self._absolute(f"/blog/{quote(article.slug)}"),
                self._article_priority,
                lastmod=article.last_modified,
            )
            emitted += 1

        logger.debug(
            "Sitemap built: %d static routes, %d articles (%d skipped without slug)",
            len(self._static_routes), emitted, len(articles) - emitted,
        )
        return etree.tostring(
            urlset, xml_declaration=True, encoding="UTF-8", pretty_print=True
        ).decode("utf-8")

    def _absolute(self, path: str) -> str:
        return f"{self._base_url}{path}"

    @staticmethod
    def _add_url(
        urlset: etree._Element,
        location: str,
        priority: float,
        lastmod: datetime | None = None,
    ) -> None:
        url = etree.SubElement(urlset, _qualified("url"))
        etree.SubElement(url, _qualified("loc")).text = location
        if lastmod is not None:
            if lastmod.tzinfo is None:
                lastmod = lastmod.replace(tzinfo=timezone.utc)
            etree.SubElement(url, _qualified("lastmod")).text = lastmod.isoformat()
        etree.SubElement(url, _qualified("priority")).text = f"{priority:.2f}"


def _qualified(tag: str) -> str:
    return f"{{{SITEMAP_NAMESPACE}}}{tag}"
