"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import (
    DEFAULT_LOOKUP_ENDPOINT,
    DEFAULT_SPARQL_ENDPOINT,
    TitleResolverConfig,
)
from .config_validator import get_optional_env, parse_number, validate_url
from .exceptions import ConfigurationError

FUZZY_MODES = ("always", "fallback", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config_from_env(load_dotenv_file: bool = True) -> TitleResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        resolver = create_article_resolver(config)

    :param load_dotenv_file: Whether to read a .env file first (local development)
    :return: Validated TitleResolverConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    if load_dotenv_file:
        load_dotenv()

    fuzzy_mode = get_optional_env("WIKI_TITLES_FUZZY_MODE", "always").lower()
    if fuzzy_mode not in FUZZY_MODES:
        raise ConfigurationError(
            f"WIKI_TITLES_FUZZY_MODE must be one of {list(FUZZY_MODES)}, got: {fuzzy_mode!r}"
        )

    raw_max_distance = get_optional_env("WIKI_TITLES_FUZZY_MAX_DISTANCE")
    max_distance = None
    if raw_max_distance:
        max_distance = parse_number(
            raw_max_distance, "WIKI_TITLES_FUZZY_MAX_DISTANCE", kind=int, minimum=0
        )

    log_level = get_optional_env("WIKI_TITLES_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"WIKI_TITLES_LOG_LEVEL must be one of {list(LOG_LEVELS)}, got: {log_level!r}"
        )

    return TitleResolverConfig(
        sparql_endpoint=validate_url(
            get_optional_env("WIKI_TITLES_SPARQL_ENDPOINT", DEFAULT_SPARQL_ENDPOINT),
            "WIKI_TITLES_SPARQL_ENDPOINT",
        ),
        sparql_timeout_seconds=parse_number(
            get_optional_env("WIKI_TITLES_SPARQL_TIMEOUT", "30"),
            "WIKI_TITLES_SPARQL_TIMEOUT",
            kind=int,
            minimum=1,
        ),
        lookup_endpoint=validate_url(
            get_optional_env("WIKI_TITLES_LOOKUP_ENDPOINT", DEFAULT_LOOKUP_ENDPOINT),
            "WIKI_TITLES_LOOKUP_ENDPOINT",
        ),
        lookup_timeout_seconds=parse_number(
            get_optional_env("WIKI_TITLES_LOOKUP_TIMEOUT", "5.0"),
            "WIKI_TITLES_LOOKUP_TIMEOUT",
            kind=float,
            minimum=0.1,
        ),
        fuzzy_mode=fuzzy_mode,
        fuzzy_max_distance=max_distance,
        log_level=log_level,
    )
