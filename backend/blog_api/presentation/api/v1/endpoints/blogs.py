"""Blog article endpoints: public reads and admin writes."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog_api.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse, MessageResponse
from blog_api.application.services import ArticleService, RelatedArticlesService
from blog_api.domain.exceptions import ArticleValidationError, EntityNotFoundError
from blog_api.infrastructure.dependencies import get_article_service, get_related_articles_service

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get("", response_model=list[ArticleResponse])
async def list_blogs(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article, newest first."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/slug/{slug}", response_model=ArticleResponse)
async def get_blog_by_slug(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by its public slug."""
    try:
        article = await service.get_article_by_slug(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{slug}/related", response_model=list[ArticleResponse])
async def get_related_blogs(
    slug: str,
    service: RelatedArticlesService = Depends(get_related_articles_service),
) -> list[ArticleResponse]:
    """Up to three articles to read after the one identified by ``slug``."""
    try:
        articles = await service.related_articles(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_blog(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article from raw rich-text content."""
    try:
        article = await service.create_article(data)
    except ArticleValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=MessageResponse)
async def update_blog(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Partially update an article. The slug never changes."""
    try:
        await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ArticleValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return MessageResponse(message="Blog updated successfully")


@router.delete("/{article_id}", response_model=MessageResponse)
async def delete_blog(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Delete an article by ID. Unknown IDs are acknowledged the same way."""
    await service.delete_article(article_id)
    return MessageResponse(message="Blog deleted successfully")
