"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.config import get_settings
from blog_api.application.interfaces import ArticleRepository
from blog_api.application.services import ArticleService, RelatedArticlesService, SitemapService
from blog_api.infrastructure.database.session import get_db_session
from blog_api.infrastructure.database.repositories import SQLAlchemyArticleRepository


async def get_article_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleRepository, None]:
    """Provides the SQLAlchemy-backed article repository for this request's session."""
    yield SQLAlchemyArticleRepository(session)


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    settings = get_settings()
    yield ArticleService(
        repository,
        meta_description_length=settings.meta_description_length,
    )


async def get_related_articles_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[RelatedArticlesService, None]:
    """Provides the related-articles recommender."""
    settings = get_settings()
    yield RelatedArticlesService(
        repository,
        limit=settings.related_limit,
        recent_window=settings.related_recent_window,
    )


async def get_sitemap_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[SitemapService, None]:
    """Provides the sitemap synthesizer bound to the public site URL."""
    settings = get_settings()
    yield SitemapService(
        repository,
        base_url=settings.site_base_url,
        article_priority=settings.sitemap_article_priority,
    )
