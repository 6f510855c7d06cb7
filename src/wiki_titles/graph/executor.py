"""
Core abstraction for graph-store query execution.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

PREFIXES = {
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "dbo": "http://dbpedia.org/ontology/",
    "dbr": "http://dbpedia.org/resource/",
}

Row = Tuple[Any, ...]


def prefix_block() -> str:
    return "".join(f"PREFIX {name}: <{uri}>\n" for name, uri in PREFIXES.items())


def build_select(
    body: str,
    variables: Sequence[str],
    offset: int = 0,
    limit: Optional[int] = None,
) -> str:
    """
    Wrap a query body into a SELECT over the given output variables.

    :param body: Graph pattern and filters (without surrounding braces)
    :param variables: Output variable names, without the leading '?'
    :param offset: Result offset
    :param limit: Optional result limit
    :return: SPARQL SELECT query without prefix declarations
    """
    projection = " ".join(f"?{var}" for var in variables)
    query = f"SELECT {projection} WHERE {{\n{body}}}\n"
    if limit is not None:
        query += f"LIMIT {int(limit)}\n"
    query += f"OFFSET {int(offset)}\n"
    return query


class GraphQueryExecutor(ABC):
    """
    Protocol for running query bodies against a graph store.

    Rows are returned as tuples of Python values (int, str, ...) in the
    same order as the requested variables; unbound values are None.
    Transport errors propagate to the caller.
    """

    @abstractmethod
    def query(
        self,
        body: str,
        variables: Sequence[str],
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[Row]:
        """
        Execute a query body.

        :param body: Graph pattern and filters using the rdfs/dbo/dbr prefixes
        :param variables: Output variable names
        :param offset: Result offset
        :param limit: Optional result limit
        :return: List of rows
        """
        pass
