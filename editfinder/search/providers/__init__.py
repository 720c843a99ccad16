"""Search providers returning raw YouTube search items."""

from typing import Optional

from ...config import ScrapingConfig, SearchConfig
from .base import RawItem, SearchProvider, SearchProviderError
from .innertube import InnertubeSearchProvider
from .youtube import YtDlpSearchProvider

PROVIDERS = {
    "innertube": InnertubeSearchProvider,
    "yt_dlp": YtDlpSearchProvider,
}


def create_provider(
    search_config: SearchConfig, scraping_config: Optional[ScrapingConfig] = None
) -> SearchProvider:
    """Instantiate the provider named by ``search_config.provider``."""
    provider_cls = PROVIDERS.get(search_config.provider)
    if provider_cls is None:
        raise ValueError(
            f"Unknown search provider '{search_config.provider}', expected one of {sorted(PROVIDERS)}"
        )
    return provider_cls(search_config, scraping_config or ScrapingConfig())


__all__ = [
    "InnertubeSearchProvider",
    "PROVIDERS",
    "RawItem",
    "SearchProvider",
    "SearchProviderError",
    "YtDlpSearchProvider",
    "create_provider",
]
