class TitleResolutionError(Exception):
    """Base exception for the title resolution service."""


class ConfigurationError(TitleResolutionError):
    """Raised when configuration values are missing or invalid."""


class LabelLookupError(TitleResolutionError):
    """Base exception for label-lookup service failures."""

    retriable = False


class LookupTransportError(LabelLookupError):
    """Raised on connection errors, timeouts and non-2xx responses."""

    retriable = True


class LookupParseError(LabelLookupError):
    """Raised when the label-lookup response is not the expected JSON shape."""
