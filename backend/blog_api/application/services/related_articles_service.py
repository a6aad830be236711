"""Related-articles recommendation for the public blog page."""

import logging

from blog_api.application.interfaces import ArticleRepository
from blog_api.domain.content import unique_by
from blog_api.domain.entities import Article
from blog_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class RelatedArticlesService:
    """Suggests articles to read next.

    Articles from the same category come first. When there are not enough of
    them, the most recently created articles fill the gap. The source article
    is never suggested and no slug appears twice.
    """

    def __init__(self, repository: ArticleRepository, limit: int = 3, recent_window: int = 5):
        self._repository = repository
        self._limit = limit
        self._recent_window = recent_window

    async def related_articles(self, slug: str) -> list[Article]:
        source = await self._repository.get_by_slug(slug)
        if source is None:
            raise EntityNotFoundError("Article", slug, field="slug")

        related = [
            article
            for article in await self._repository.get_by_category(source.category)
            if article.slug != slug
        ]

        if len(related) < self._limit:
            recent = [
                article
                for article in await self._repository.get_recent(self._recent_window)
                if article.slug != slug
            ]
            logger.debug(
                "Only %d category matches for slug=%s, adding %d recent candidates",
                len(related), slug, len(recent),
            )
            related = related + recent

        return unique_by(related, key=lambda article: article.slug)[: self._limit]
