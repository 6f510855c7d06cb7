"""
Executor over an in-memory rdflib graph.

Useful for local DBpedia extracts and for exercising the title query
semantics without a remote endpoint.
"""
import logging
from typing import List, Optional, Sequence

from rdflib import Graph, Literal, Namespace

from .executor import PREFIXES, GraphQueryExecutor, Row, build_select

logger = logging.getLogger(__name__)


def _to_python(term):
    if term is None:
        return None
    if isinstance(term, Literal):
        value = term.toPython()
        # Plain and language-tagged strings come back as Literal
        return str(value) if isinstance(value, Literal) else value
    return str(term)


class RdflibGraphExecutor(GraphQueryExecutor):
    """Runs SELECT queries with rdflib's SPARQL engine."""

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()
        self._namespaces = {name: Namespace(uri) for name, uri in PREFIXES.items()}

    @classmethod
    def from_file(cls, path: str, format: Optional[str] = None) -> "RdflibGraphExecutor":
        """Load a serialized graph (Turtle, N-Triples, ...) from disk."""
        graph = Graph()
        graph.parse(path, format=format)
        logger.info(f"Loaded {len(graph)} triples from {path}")
        return cls(graph)

    def query(
        self,
        body: str,
        variables: Sequence[str],
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[Row]:
        sparql = build_select(body, variables, offset=offset, limit=limit)
        results = self.graph.query(sparql, initNs=self._namespaces)
        return [tuple(_to_python(term) for term in row) for row in results]
