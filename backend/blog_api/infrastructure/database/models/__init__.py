from .article import ArticleModel

__all__ = [
    "ArticleModel",
]
