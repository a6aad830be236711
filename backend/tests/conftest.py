"""Shared fixtures: an in-memory ArticleRepository and an article factory."""

from datetime import datetime, timedelta, timezone

import pytest

from blog_api.application.interfaces import ArticleRepository
from blog_api.domain.entities import Article


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    def _newest_first(self, articles: list[Article]) -> list[Article]:
        return sorted(articles, key=lambda a: (a.created_at, a.id), reverse=True)

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def get_by_slug(self, slug: str) -> Article | None:
        return next((a for a in self._articles.values() if a.slug == slug), None)

    async def slug_exists(self, slug: str) -> bool:
        return any(a.slug == slug for a in self._articles.values())

    async def get_all(self) -> list[Article]:
        return self._newest_first(list(self._articles.values()))

    async def get_by_category(self, category: str) -> list[Article]:
        return self._newest_first([a for a in self._articles.values() if a.category == category])

    async def get_recent(self, limit: int) -> list[Article]:
        return (await self.get_all())[:limit]

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def add_article(repository: FakeArticleRepository):
    """Store an article directly, each one a minute newer than the last."""
    base = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def _add(slug: str, category: str = "Catering", **overrides) -> Article:
        created_at = base + timedelta(minutes=counter["n"])
        counter["n"] += 1
        fields = {
            "title": slug.replace("-", " ").title(),
            "category": category,
            "content": f"<p>{slug}</p>",
            "slug": slug,
            "created_at": created_at,
            "updated_at": created_at,
        }
        fields.update(overrides)
        return await repository.create(Article(**fields))

    return _add
