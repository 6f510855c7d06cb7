"""
wiki_titles: resolve free-text titles to enwiki article identifiers.
"""
from .models import Article
from .config import TitleResolverConfig
from .resolution import ArticleTitleResolver, create_article_resolver

__version__ = "0.1.0"

__all__ = [
    "Article",
    "TitleResolverConfig",
    "ArticleTitleResolver",
    "create_article_resolver",
]
