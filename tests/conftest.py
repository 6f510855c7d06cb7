"""
Shared fixtures: a small DBpedia-like rdflib graph and label-lookup stubs.
"""
import json
from typing import Callable, List, Optional

import httpx
import pytest
from rdflib import Graph, Literal, Namespace, RDFS

from wiki_titles.graph import RdflibGraphExecutor

DBO = Namespace("http://dbpedia.org/ontology/")
DBR = Namespace("http://dbpedia.org/resource/")


def add_article(graph: Graph, name: str, page_id: int, *labels) -> None:
    """Add a resource with a page ID and (text, lang) labels."""
    res = DBR[name]
    graph.add((res, DBO.wikiPageID, Literal(page_id)))
    for text, lang in labels:
        graph.add((res, RDFS.label, Literal(text, lang=lang)))


@pytest.fixture
def dbpedia_graph() -> Graph:
    graph = Graph()

    # Redirect: Obama -> Barack Obama
    add_article(graph, "Barack_Obama", 534366, ("Barack Obama", "en"), ("Barack Obama", "de"))
    add_article(graph, "Obama", 2186711, ("Obama", "en"))
    graph.add((DBR["Obama"], DBO.wikiPageRedirects, DBR["Barack_Obama"]))

    # Redirect to an all-caps label
    add_article(graph, "IBM", 18622491, ("IBM", "en"))
    add_article(graph, "Ibm", 1000001, ("Ibm", "en"))
    graph.add((DBR["Ibm"], DBO.wikiPageRedirects, DBR["IBM"]))

    # Disambiguation page
    add_article(graph, "Mercury_(planet)", 19694, ("Mercury (planet)", "en"))
    add_article(graph, "Mercury_(element)", 18617142, ("Mercury (element)", "en"))
    add_article(graph, "Mercury", 20001, ("Mercury", "en"))
    graph.add((DBR["Mercury"], DBO.wikiPageDisambiguates, DBR["Mercury_(planet)"]))
    graph.add((DBR["Mercury"], DBO.wikiPageDisambiguates, DBR["Mercury_(element)"]))

    # Article next to an in-namespace page with the same label
    add_article(graph, "X-men", 100, ("X-men", "en"))
    add_article(graph, "Category:X-men", 200, ("X-men", "en"))

    # German-only label
    add_article(graph, "Kindergarten_(de)", 300, ("Kita", "de"))

    add_article(graph, "NASA", 18426501, ("NASA", "en"))
    return graph


@pytest.fixture
def graph_executor(dbpedia_graph) -> RdflibGraphExecutor:
    return RdflibGraphExecutor(dbpedia_graph)


def lookup_record(
    matched_label: str,
    page_id: int,
    dist: int = 0,
    name: Optional[str] = None,
    canon_label: Optional[str] = None,
) -> dict:
    return {
        "name": name or matched_label.replace(" ", "_"),
        "pageID": page_id,
        "matchedLabel": matched_label,
        "canonLabel": canon_label or matched_label,
        "dist": dist,
    }


def make_lookup_client(
    results: Optional[List[dict]] = None,
    status_code: int = 200,
    raise_error: Optional[Exception] = None,
    body: Optional[bytes] = None,
    requests: Optional[list] = None,
) -> httpx.Client:
    """Build an httpx.Client whose transport emulates the label-lookup service."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if raise_error is not None:
            raise raise_error
        if body is not None:
            return httpx.Response(status_code=status_code, content=body)
        payload = {"results": results if results is not None else []}
        return httpx.Response(status_code=status_code, content=json.dumps(payload).encode())

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def lookup_client_factory() -> Callable[..., httpx.Client]:
    return make_lookup_client
