"""Search module for editing video discovery."""

from .classifier import filter_videos, is_short, is_tutorial
from .normalizer import normalize_item, normalize_items
from .providers import SearchProvider, SearchProviderError, create_provider
from .query import augment_query

__all__ = [
    "SearchProvider",
    "SearchProviderError",
    "augment_query",
    "create_provider",
    "filter_videos",
    "is_short",
    "is_tutorial",
    "normalize_item",
    "normalize_items",
]
