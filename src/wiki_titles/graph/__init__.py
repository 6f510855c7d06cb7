"""
Graph-store query executors.

The title resolver builds SPARQL query bodies; executors run them against
a concrete store and hand back rows of plain Python values.
"""
from .executor import GraphQueryExecutor, PREFIXES, build_select
from .rdflib_executor import RdflibGraphExecutor
from .sparql_endpoint import SparqlEndpointExecutor

__all__ = [
    "GraphQueryExecutor",
    "PREFIXES",
    "build_select",
    "RdflibGraphExecutor",
    "SparqlEndpointExecutor",
]
