"""
Title resolution layer mapping free-text titles to enwiki articles.

Key components:
- cooked_titles: Alternate title forms to probe
- GraphTitleMatcher: Label/redirect/disambiguation match in the graph store
- LabelLookupClient: Fuzzy label search service client
- ResolutionPolicy: How fuzzy matches combine with graph matches
- ArticleTitleResolver: Orchestrates the above per title
"""
from .title_forms import cooked_titles
from .title_query import (
    TitleQuery,
    build_title_query,
    normalize_label,
    sanitize_title,
    was_capitalized,
)
from .graph_matcher import GraphTitleMatcher
from .label_lookup import LabelLookupClient, encode_label
from .resolution_policy import FuzzyMode, ResolutionPolicy
from .resolution_result import TitleResolution
from .article_resolver import ArticleTitleResolver
from .resolver_factory import create_article_resolver

__all__ = [
    "cooked_titles",
    "TitleQuery",
    "build_title_query",
    "normalize_label",
    "sanitize_title",
    "was_capitalized",
    "GraphTitleMatcher",
    "LabelLookupClient",
    "encode_label",
    "FuzzyMode",
    "ResolutionPolicy",
    "TitleResolution",
    "ArticleTitleResolver",
    "create_article_resolver",
]
