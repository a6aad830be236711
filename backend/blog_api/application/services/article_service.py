"""Application service (use case) for blog Article operations."""

import logging

from blog_api.application.interfaces import ArticleRepository
from blog_api.application.schemas import ArticleCreate, ArticleUpdate
from blog_api.domain.content import (
    RESERVED_SLUGS,
    excerpt,
    generate_slug,
    sanitize_html,
    with_suffix,
)
from blog_api.domain.entities import Article
from blog_api.domain.exceptions import (
    ArticleValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "category", "content")

# Column sizes of the article table.
_MAX_LENGTHS = {"title": 255, "category": 100, "meta_title": 255}


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Every body that reaches the repository has been through ``sanitize_html``
    on both the create and the update path.
    """

    def __init__(self, repository: ArticleRepository, meta_description_length: int = 160):
        self._repository = repository
        self._meta_description_length = meta_description_length

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            logger.debug("Article id=%s not found", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_article_by_slug(self, slug: str) -> Article:
        article = await self._repository.get_by_slug(slug)
        if article is None:
            logger.debug("Article slug=%s not found", slug)
            raise EntityNotFoundError("Article", slug, field="slug")
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        missing = [name for name in _REQUIRED_FIELDS if _is_blank(getattr(data, name))]
        if missing:
            raise ArticleValidationError(
                f"Missing required fields: {', '.join(missing)}", fields=missing
            )

        title = data.title.strip()
        category = data.category.strip()
        _check_lengths({"title": title, "category": category, "meta_title": data.meta_title})
        content = sanitize_html(data.content)
        base_slug = generate_slug(title)
        if not base_slug:
            raise ArticleValidationError(
                "Title must contain at least one letter or digit", fields=["title"]
            )

        article = Article(
            title=title,
            category=category,
            content=content,
            slug=base_slug,
            meta_title=data.meta_title or title,
            meta_description=data.meta_description
            or excerpt(content, self._meta_description_length),
        )
        # Both timestamps start from the same instant.
        article.updated_at = article.created_at

        created = await self._create_with_unique_slug(article, base_slug)
        logger.info("Created article id=%s slug=%s", created.id, created.slug)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)

        changes = {
            name: value
            for name, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        empty = [name for name in _REQUIRED_FIELDS if name in changes and _is_blank(changes[name])]
        if empty:
            raise ArticleValidationError(
                f"Fields cannot be empty: {', '.join(empty)}", fields=empty
            )

        for name in ("title", "category"):
            if name in changes:
                changes[name] = changes[name].strip()
        _check_lengths(changes)
        if "content" in changes:
            changes["content"] = sanitize_html(changes["content"])

        article.update(**changes)
        updated = await self._repository.update(article)
        logger.info("Updated article id=%s fields=%s", article_id, sorted(changes))
        return updated

    async def delete_article(self, article_id: int) -> bool:
        """Delete an article. Deleting an unknown id is not an error."""
        deleted = await self._repository.delete(article_id)
        if deleted:
            logger.info("Deleted article id=%s", article_id)
        else:
            logger.debug("Delete of unknown article id=%s ignored", article_id)
        return deleted

    async def _create_with_unique_slug(self, article: Article, base_slug: str) -> Article:
        """Store ``article`` under ``base_slug`` or the first free ``base_slug-N`` (N >= 2).

        Reserved slugs count as taken. When a concurrent insert claims the
        chosen slug first, the next suffix is tried.
        """
        slug = base_slug
        counter = 2
        while True:
            if slug not in RESERVED_SLUGS and not await self._repository.slug_exists(slug):
                article.slug = slug
                try:
                    return await self._repository.create(article)
                except DuplicateEntityError:
                    logger.info("Slug %s was taken concurrently, trying the next suffix", slug)
            slug = with_suffix(base_slug, counter)
            counter += 1


def _check_lengths(values: dict[str, str | None]) -> None:
    too_long = [
        name
        for name, limit in _MAX_LENGTHS.items()
        if values.get(name) is not None and len(values[name]) > limit
    ]
    if too_long:
        limits = ", ".join(f"{name} (max {_MAX_LENGTHS[name]})" for name in too_long)
        raise ArticleValidationError(f"Fields too long: {limits}", fields=too_long)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
