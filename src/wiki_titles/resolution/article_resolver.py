"""
Title resolver combining graph-store matching and fuzzy label lookup.
"""
import logging
from typing import List, Optional

from ..models import Article
from .graph_matcher import GraphTitleMatcher
from .label_lookup import LabelLookupClient
from .resolution_policy import ResolutionPolicy
from .resolution_result import TitleResolution
from .title_forms import cooked_titles
from .title_query import TitleQuery, build_title_query

logger = logging.getLogger(__name__)


class ArticleTitleResolver:
    """
    Resolves a free-text title to enwiki articles.

    Title forms are tried strictly in order and the first form with any
    result wins. Per form, the graph store is queried and the label-lookup
    service is consulted as the ResolutionPolicy dictates.

    Usage:
        resolver = ArticleTitleResolver(GraphTitleMatcher(executor), LabelLookupClient())
        articles = resolver.resolve("obama")
    """

    def __init__(
        self,
        graph_matcher: GraphTitleMatcher,
        lookup_client: Optional[LabelLookupClient] = None,
        policy: Optional[ResolutionPolicy] = None,
    ):
        """
        Initialize the resolver.

        :param graph_matcher: Exact matcher over the graph store
        :param lookup_client: Fuzzy label-lookup client; None disables fuzzy lookup
        :param policy: ResolutionPolicy, defaults to always appending the nearest fuzzy match
        """
        self._graph_matcher = graph_matcher
        self._lookup_client = lookup_client
        self._policy = policy or ResolutionPolicy()

    def resolve(self, title: str) -> List[Article]:
        """
        Resolve a title to articles.

        :param title: Title to resolve
        :return: Graph matches followed by fuzzy matches, possibly empty
        """
        return self.resolve_detailed(title).articles

    def resolve_detailed(self, title: str) -> TitleResolution:
        """
        Resolve a title, keeping graph and fuzzy matches apart.

        :param title: Title to resolve
        :return: TitleResolution for the first productive title form
        """
        last_form = None
        tried = set()
        for form in cooked_titles(title):
            query = build_title_query(form)
            # Forms that capitalize to an already tried label repeat the same query
            if query is None or query.matched_title in tried:
                continue
            tried.add(query.matched_title)
            last_form = form
            resolution = self._resolve_query(title, form, query)
            if not resolution.is_empty():
                logger.info(
                    f"Resolved {title!r} via form {form!r}: "
                    f"{len(resolution.graph_matches)} graph, {len(resolution.fuzzy_matches)} fuzzy"
                )
                return resolution

        logger.info(f"No article found for {title!r}")
        return TitleResolution(original_title=title, title_form=last_form)

    def resolve_multiple(self, titles: List[str]) -> List[List[Article]]:
        """
        Resolve multiple titles in batch.

        :param titles: List of titles to resolve
        :return: One article list per title
        """
        return [self.resolve(title) for title in titles]

    def _resolve_query(self, title: str, form: str, query: TitleQuery) -> TitleResolution:
        graph_matches = self._graph_matcher.run(query)

        fuzzy_matches: List[Article] = []
        if self._lookup_client is not None and self._policy.should_lookup(graph_matches):
            candidates = self._lookup_client.lookup(
                query.matched_title, limit=self._policy.fuzzy_limit
            )
            fuzzy_matches = self._policy.filter_fuzzy(candidates)

        return TitleResolution(
            original_title=title,
            title_form=form,
            graph_matches=graph_matches,
            fuzzy_matches=fuzzy_matches,
        )
