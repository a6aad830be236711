"""Unit tests for the ArticleService."""

import pytest

from blog_api.application.schemas import ArticleCreate, ArticleUpdate
from blog_api.application.services import ArticleService
from blog_api.domain.exceptions import (
    ArticleValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
)


@pytest.fixture
def service(repository) -> ArticleService:
    return ArticleService(repository)


def _payload(**overrides) -> ArticleCreate:
    fields = {
        "title": "Planning a Summer Wedding Menu",
        "category": "Weddings",
        "content": "<p>Seasonal produce makes all the difference.</p>",
    }
    fields.update(overrides)
    return ArticleCreate(**fields)


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    article = await service.create_article(_payload())
    assert article.id is not None
    assert article.slug == "planning-a-summer-wedding-menu"
    assert article.category == "Weddings"
    assert article.created_at == article.updated_at


@pytest.mark.asyncio
async def test_create_article_defaults_meta_fields(service: ArticleService):
    article = await service.create_article(_payload())
    assert article.meta_title == "Planning a Summer Wedding Menu"
    assert article.meta_description == "Seasonal produce makes all the difference."


@pytest.mark.asyncio
async def test_create_article_keeps_supplied_meta_fields(service: ArticleService):
    article = await service.create_article(
        _payload(meta_title="Summer Weddings", meta_description="Menus that shine in July.")
    )
    assert article.meta_title == "Summer Weddings"
    assert article.meta_description == "Menus that shine in July."


@pytest.mark.asyncio
async def test_default_meta_description_is_bounded_plain_text(service: ArticleService):
    article = await service.create_article(_payload(content="<p>" + "A" * 300 + "</p>"))
    assert len(article.meta_description) == 160
    assert article.meta_description == "A" * 160


@pytest.mark.asyncio
async def test_default_meta_description_keeps_escaped_markup_escaped(service: ArticleService):
    article = await service.create_article(
        _payload(
            content="<p>&lt;script&gt;alert(1)&lt;/script&gt; "
            "&lt;img src=x onerror=alert(2)&gt;</p>"
        )
    )
    assert "<" not in article.meta_description
    assert ">" not in article.meta_description
    assert article.meta_description.startswith("&lt;script&gt;alert(1)")


@pytest.mark.asyncio
async def test_meta_description_length_is_configurable(repository):
    service = ArticleService(repository, meta_description_length=150)
    article = await service.create_article(_payload(content="<p>" + "B" * 300 + "</p>"))
    assert len(article.meta_description) == 150


@pytest.mark.asyncio
async def test_create_article_sanitizes_content(service: ArticleService):
    article = await service.create_article(
        _payload(content='<p onclick="x()">Hi</p><script>alert(1)</script><div>there</div>')
    )
    assert article.content == "<p>Hi</p>there"


@pytest.mark.asyncio
async def test_create_article_missing_fields(service: ArticleService):
    with pytest.raises(ArticleValidationError) as exc_info:
        await service.create_article(ArticleCreate(title="Only a title"))
    assert exc_info.value.fields == ["category", "content"]


@pytest.mark.asyncio
async def test_create_article_rejects_blank_values(service: ArticleService):
    with pytest.raises(ArticleValidationError) as exc_info:
        await service.create_article(_payload(title="   "))
    assert exc_info.value.fields == ["title"]


@pytest.mark.asyncio
async def test_create_article_rejects_title_without_slug(service: ArticleService):
    with pytest.raises(ArticleValidationError):
        await service.create_article(_payload(title="!!!"))


@pytest.mark.asyncio
async def test_duplicate_titles_get_numbered_slugs(service: ArticleService):
    first = await service.create_article(_payload())
    second = await service.create_article(_payload())
    third = await service.create_article(_payload())
    assert first.slug == "planning-a-summer-wedding-menu"
    assert second.slug == "planning-a-summer-wedding-menu-2"
    assert third.slug == "planning-a-summer-wedding-menu-3"


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_get_article_by_slug(service: ArticleService):
    created = await service.create_article(_payload())
    found = await service.get_article_by_slug("planning-a-summer-wedding-menu")
    assert found.id == created.id


@pytest.mark.asyncio
async def test_get_article_by_slug_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.get_article_by_slug("missing")
    assert exc_info.value.field == "slug"


@pytest.mark.asyncio
async def test_list_articles_newest_first(service: ArticleService):
    await service.create_article(_payload(title="A1"))
    await service.create_article(_payload(title="A2"))
    articles = await service.list_articles()
    assert [a.title for a in articles] == ["A2", "A1"]


@pytest.mark.asyncio
async def test_update_title_keeps_slug(service: ArticleService):
    created = await service.create_article(_payload(title="Old Title"))
    updated = await service.update_article(created.id, ArticleUpdate(title="New Title"))
    assert updated.title == "New Title"
    assert updated.slug == "old-title"
    assert updated.content == "<p>Seasonal produce makes all the difference.</p>"


@pytest.mark.asyncio
async def test_update_refreshes_updated_at(service: ArticleService):
    created = await service.create_article(_payload())
    before = created.updated_at
    updated = await service.update_article(created.id, ArticleUpdate(category="Events"))
    assert updated.updated_at > before
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_resanitizes_content(service: ArticleService):
    created = await service.create_article(_payload())
    updated = await service.update_article(
        created.id,
        ArticleUpdate(content='<p>New</p><a href="javascript:evil()">x</a><iframe src="https://x"></iframe>'),
    )
    assert updated.content == "<p>New</p><a>x</a>"


@pytest.mark.asyncio
async def test_update_does_not_recompute_meta_description(service: ArticleService):
    created = await service.create_article(_payload())
    updated = await service.update_article(created.id, ArticleUpdate(content="<p>Different</p>"))
    assert updated.meta_description == "Seasonal produce makes all the difference."


@pytest.mark.asyncio
async def test_update_can_clear_meta_description(service: ArticleService):
    created = await service.create_article(_payload())
    updated = await service.update_article(created.id, ArticleUpdate(meta_description=""))
    assert updated.meta_description == ""


@pytest.mark.asyncio
async def test_update_rejects_empty_required_field(service: ArticleService):
    created = await service.create_article(_payload())
    with pytest.raises(ArticleValidationError):
        await service.update_article(created.id, ArticleUpdate(title=""))


@pytest.mark.asyncio
async def test_update_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(title="Nope"))


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(_payload())
    result = await service.delete_article(created.id)
    assert result is True
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_unknown_article_is_not_an_error(service: ArticleService):
    assert await service.delete_article(12345) is False


@pytest.mark.asyncio
async def test_slug_taken_after_check_moves_to_next_suffix(repository, add_article, monkeypatch):
    await add_article("summer-menu")
    original_create = repository.create

    async def stale_slug_exists(slug: str) -> bool:
        return False

    async def create_rejecting_duplicates(article):
        if any(stored.slug == article.slug for stored in await repository.get_all()):
            raise DuplicateEntityError("Article", "slug", article.slug)
        return await original_create(article)

    monkeypatch.setattr(repository, "slug_exists", stale_slug_exists)
    monkeypatch.setattr(repository, "create", create_rejecting_duplicates)

    article = await ArticleService(repository).create_article(_payload(title="Summer Menu"))
    assert article.slug == "summer-menu-2"
    assert len(await repository.get_all()) == 2


@pytest.mark.asyncio
async def test_reserved_slug_is_never_assigned(service: ArticleService):
    article = await service.create_article(_payload(title="Slug"))
    assert article.slug == "slug-2"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"title": "T" * 256}, "title"),
        ({"category": "C" * 101}, "category"),
        ({"meta_title": "M" * 256}, "meta_title"),
    ],
)
async def test_create_article_rejects_over_long_fields(service: ArticleService, overrides, field):
    with pytest.raises(ArticleValidationError) as exc_info:
        await service.create_article(_payload(**overrides))
    assert exc_info.value.fields == [field]


@pytest.mark.asyncio
async def test_create_article_accepts_fields_at_the_limit(service: ArticleService):
    article = await service.create_article(_payload(title="T" * 255, category="C" * 100))
    assert len(article.title) == 255


@pytest.mark.asyncio
async def test_update_rejects_over_long_category(service: ArticleService):
    created = await service.create_article(_payload())
    with pytest.raises(ArticleValidationError) as exc_info:
        await service.update_article(created.id, ArticleUpdate(category="C" * 101))
    assert exc_info.value.fields == ["category"]
    assert (await service.get_article(created.id)).category == "Weddings"
