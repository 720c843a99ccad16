"""Exceptions raised by the discovery pipeline."""


class DiscoveryError(Exception):
    """Base class for discovery failures."""


class MissingQueryError(DiscoveryError):
    """Raised when a search is requested without a usable query."""

    def __init__(self, message: str = "Missing search query"):
        super().__init__(message)


class ProviderError(DiscoveryError):
    """Raised when the video search provider fails."""
