"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Article:
    """Core domain entity representing a blog article."""

    title: str
    category: str
    content: str
    slug: str
    meta_title: str = ""
    meta_description: str = ""
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def update(
        self,
        title: str | None = None,
        category: str | None = None,
        content: str | None = None,
        meta_title: str | None = None,
        meta_description: str | None = None,
    ) -> None:
        """Update article fields and refresh the updated_at timestamp.

        The slug is deliberately left alone so public URLs stay stable.
        """
        if title is not None:
            self.title = title
        if category is not None:
            self.category = category
        if content is not None:
            self.content = content
        if meta_title is not None:
            self.meta_title = meta_title
        if meta_description is not None:
            self.meta_description = meta_description
        self.touch()

    def touch(self) -> None:
        """Move updated_at forward, never leaving it equal to its previous value."""
        now = _utcnow()
        previous = self.updated_at
        if previous.tzinfo is None:
            previous = previous.replace(tzinfo=timezone.utc)
        self.updated_at = max(now, previous + timedelta(microseconds=1))

    @property
    def last_modified(self) -> datetime:
        return self.updated_at or self.created_at
