from dataclasses import dataclass
from typing import Optional


DEFAULT_SPARQL_ENDPOINT = "http://dbpedia.org/sparql"
DEFAULT_LOOKUP_ENDPOINT = "http://dbp-labels.ailao.eu:5000"


@dataclass
class TitleResolverConfig:
    # Graph store
    sparql_endpoint: str = DEFAULT_SPARQL_ENDPOINT
    sparql_timeout_seconds: int = 30

    # Label-lookup service
    lookup_endpoint: str = DEFAULT_LOOKUP_ENDPOINT
    lookup_timeout_seconds: float = 5.0

    # Fuzzy merge policy
    fuzzy_mode: str = "always"
    fuzzy_max_distance: Optional[int] = None

    # Logging
    log_level: str = "INFO"
