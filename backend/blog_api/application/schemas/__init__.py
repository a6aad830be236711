from .article import ArticleCreate, ArticleUpdate, ArticleResponse, MessageResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "MessageResponse",
]
