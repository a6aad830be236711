"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from collections.abc import Awaitable
from datetime import datetime, timezone
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import ArticleRepository
from blog_api.domain.entities import Article
from blog_api.domain.exceptions import DuplicateEntityError, StoreError
from blog_api.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            category=model.category,
            content=model.content,
            slug=model.slug,
            meta_title=model.meta_title,
            meta_description=model.meta_description,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            category=entity.category,
            content=entity.content,
            slug=entity.slug,
            meta_title=entity.meta_title,
            meta_description=entity.meta_description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _guard(self, operation: str, pending: Awaitable[T]) -> T:
        """Await a store call, translating driver failures into ``StoreError``."""
        try:
            return await pending
        except SQLAlchemyError as exc:
            logger.exception("Article store failure during %s", operation)
            raise StoreError(operation) from exc

    async def _fetch(self, operation: str, stmt) -> list[Article]:
        result = await self._guard(operation, self._session.execute(stmt))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._guard("get_by_id", self._session.get(ArticleModel, article_id))
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug).order_by(ArticleModel.id).limit(1)
        found = await self._fetch("get_by_slug", stmt)
        return found[0] if found else None

    async def slug_exists(self, slug: str) -> bool:
        stmt = select(ArticleModel.id).where(ArticleModel.slug == slug).limit(1)
        result = await self._guard("slug_exists", self._session.execute(stmt))
        return result.first() is not None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
        return await self._fetch("get_all", stmt)

    async def get_by_category(self, category: str) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.category == category)
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
        )
        return await self._fetch("get_by_category", stmt)

    async def get_recent(self, limit: int) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
            .limit(limit)
        )
        return await self._fetch("get_recent", stmt)

    async def create(self, article: Article) -> Article:
        """Insert ``article``; a slug taken since it was checked raises DuplicateEntityError.

        The failed insert is rolled back so the session stays usable for a retry.
        """
        model = self._to_model(article)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._guard("create", self._session.rollback())
            logger.warning("Slug %s already stored, insert rolled back", article.slug)
            raise DuplicateEntityError("Article", "slug", article.slug) from exc
        except SQLAlchemyError as exc:
            logger.exception("Article store failure during create")
            raise StoreError("create") from exc
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._guard("update", self._session.get(ArticleModel, article.id))
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.category = article.category
        model.content = article.content
        model.meta_title = article.meta_title
        model.meta_description = article.meta_description
        model.updated_at = article.updated_at
        await self._guard("update", self._session.flush())
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._guard("delete", self._session.get(ArticleModel, article_id))
        if model is None:
            return False
        await self._guard("delete", self._session.delete(model))
        await self._guard("delete", self._session.flush())
        return True


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
