"""
Factory for creating title resolvers from configuration.
"""
from typing import Optional

import httpx

from ..config import TitleResolverConfig
from ..graph.executor import GraphQueryExecutor
from ..graph.sparql_endpoint import SparqlEndpointExecutor
from .article_resolver import ArticleTitleResolver
from .graph_matcher import GraphTitleMatcher
from .label_lookup import LabelLookupClient
from .resolution_policy import FuzzyMode, ResolutionPolicy


def create_article_resolver(
    config: Optional[TitleResolverConfig] = None,
    executor: Optional[GraphQueryExecutor] = None,
    http_client: Optional[httpx.Client] = None,
) -> ArticleTitleResolver:
    """
    Factory function to create an ArticleTitleResolver.

    Uses a remote SPARQL endpoint executor unless one is provided. The
    label-lookup client is left out entirely when the fuzzy mode is "never".

    :param config: TitleResolverConfig instance, defaults apply if None
    :param executor: Optional pre-built graph query executor
    :param http_client: Optional shared httpx.Client for the lookup service
    :return: Configured ArticleTitleResolver
    """
    config = config or TitleResolverConfig()

    if executor is None:
        executor = SparqlEndpointExecutor(
            config.sparql_endpoint,
            timeout=config.sparql_timeout_seconds,
        )

    policy = ResolutionPolicy(
        mode=FuzzyMode(config.fuzzy_mode),
        max_distance=config.fuzzy_max_distance,
    )

    lookup_client = None
    if policy.mode is not FuzzyMode.NEVER:
        lookup_client = LabelLookupClient(
            endpoint=config.lookup_endpoint,
            timeout_seconds=config.lookup_timeout_seconds,
            http_client=http_client,
        )

    return ArticleTitleResolver(
        graph_matcher=GraphTitleMatcher(executor),
        lookup_client=lookup_client,
        policy=policy,
    )
