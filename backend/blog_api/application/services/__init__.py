from .article_service import ArticleService
from .related_articles_service import RelatedArticlesService
from .sitemap_service import SitemapService, StaticRoute, STATIC_ROUTES

__all__ = [
    "ArticleService",
    "RelatedArticlesService",
    "SitemapService",
    "StaticRoute",
    "STATIC_ROUTES",
]
