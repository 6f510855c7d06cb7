"""
Executor over a remote SPARQL endpoint (e.g. the public DBpedia endpoint).
"""
import logging
from typing import Callable, List, Optional, Sequence

from SPARQLWrapper import JSON, SPARQLWrapper

from .executor import GraphQueryExecutor, Row, build_select, prefix_block

logger = logging.getLogger(__name__)

XSD = "http://www.w3.org/2001/XMLSchema#"
INTEGER_DATATYPES = {
    XSD + name
    for name in (
        "integer", "int", "long", "short", "byte",
        "nonNegativeInteger", "positiveInteger",
        "unsignedInt", "unsignedLong",
    )
}


def _binding_value(binding: Optional[dict]):
    if binding is None:
        return None
    value = binding.get("value")
    if binding.get("datatype") in INTEGER_DATATYPES:
        return int(value)
    return value


class SparqlEndpointExecutor(GraphQueryExecutor):
    """
    Runs SELECT queries against a SPARQL 1.1 HTTP endpoint, JSON results.

    SPARQLWrapper objects hold the query being built, so a fresh one is
    created for every call.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: int = 30,
        wrapper_factory: Callable[[str], SPARQLWrapper] = SPARQLWrapper,
    ):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._wrapper_factory = wrapper_factory

    def query(
        self,
        body: str,
        variables: Sequence[str],
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[Row]:
        sparql = self._wrapper_factory(self.endpoint_url)
        sparql.setReturnFormat(JSON)
        sparql.setTimeout(self.timeout)
        sparql.setQuery(prefix_block() + build_select(body, variables, offset=offset, limit=limit))

        logger.debug(f"Executing SPARQL query against {self.endpoint_url}")
        response = sparql.query().convert()

        bindings = response.get("results", {}).get("bindings", [])
        return [
            tuple(_binding_value(binding.get(var)) for var in variables)
            for binding in bindings
        ]
