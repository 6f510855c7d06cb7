"""
Exact title matching against the graph store.
"""
import logging
from typing import List

from ..graph.executor import GraphQueryExecutor
from ..models import Article
from .title_query import TitleQuery, build_title_query, normalize_label

logger = logging.getLogger(__name__)


class GraphTitleMatcher:
    """
    Resolves a title form to articles via label, redirect and
    disambiguation edges of a DBpedia-style graph.

    Returned articles keep the raw label as ``matched_label`` and carry the
    casing-restored label as ``canon_label``. Executor errors propagate.
    """

    def __init__(self, executor: GraphQueryExecutor):
        self._executor = executor

    def match(self, title: str) -> List[Article]:
        """
        Find articles whose label (or redirect/disambiguation source label)
        equals the title.

        :param title: Title form to look up
        :return: Exact matches, possibly empty
        """
        query = build_title_query(title)
        if query is None:
            logger.debug(f"Title {title!r} is empty after sanitization, skipping graph query")
            return []
        return self.run(query)

    def run(self, query: TitleQuery) -> List[Article]:
        """Execute a prepared TitleQuery and reconcile its rows."""
        rows = self._executor.query(query.body, list(query.variables), offset=0)

        results: List[Article] = []
        for page_id, label in rows:
            if page_id is None or not label:
                continue
            canon = normalize_label(label, query.was_capitalized)
            logger.debug(f"DBpedia {query.matched_title}: [[{canon}]] ({page_id})")
            results.append(Article.from_graph_row(label, int(page_id), canon_label=canon))
        return results
