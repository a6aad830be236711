"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations raise ``StoreError`` when the backend itself fails; a
    missing record is reported with ``None`` / ``False``, never an exception.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        """Retrieve the first article whose slug equals ``slug``."""
        ...

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        """Whether any stored article already uses ``slug``."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, newest first (created_at descending)."""
        ...

    @abstractmethod
    async def get_by_category(self, category: str) -> list[Article]:
        """Retrieve every article in ``category``, newest first."""
        ...

    @abstractmethod
    async def get_recent(self, limit: int) -> list[Article]:
        """Retrieve the ``limit`` most recently created articles."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID.

        Raises DuplicateEntityError when the slug is already stored.
        """
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
