"""
Configuration validation utilities.
"""
import os
import warnings
from typing import Optional
from urllib.parse import urlparse

from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def validate_url(url: str, url_name: str) -> str:
    """
    Validate an HTTP(S) endpoint URL and strip any trailing slash.

    :param url: URL to validate
    :param url_name: Name of the setting (for error messages)
    :return: Normalized URL
    :raises: ConfigurationError if invalid
    """
    if not url:
        raise ConfigurationError(f"{url_name} is required.")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(
            f"{url_name} must be an http(s) URL, got: {url}"
        )

    return url.rstrip("/")


def parse_number(value: str, name: str, kind=float, minimum: Optional[float] = None):
    """
    Parse a numeric setting.

    :param value: Raw string value
    :param name: Name of the setting (for error messages)
    :param kind: int or float
    :param minimum: Optional inclusive lower bound
    :return: Parsed number
    :raises: ConfigurationError if not a number or below minimum
    """
    try:
        number = kind(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{name} must be a {kind.__name__}, got: {value!r}"
        ) from None

    if minimum is not None and number < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got: {number}")

    return number


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "replace",
        "TODO",
    ]

    value_lower = value.lower()
    return any(pattern.lower() in value_lower for pattern in placeholder_patterns)
