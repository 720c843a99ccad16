"""Discovery pipeline orchestration.

One search request flows strictly forward: validate the query, augment it
for the requested mode, make a single provider call, normalize every raw
item and filter the normalized videos. Nothing is cached or shared
between requests.
"""

import logging
import time
from typing import Optional

from .config import DiscoveryConfig
from .exceptions import MissingQueryError, ProviderError
from .models import SearchMode, SearchResponse
from .search import augment_query, create_provider, filter_videos, normalize_items
from .search.providers import SearchProvider

logger = logging.getLogger(__name__)

VIDEO_ONLY_OPTIONS = [{"type": "video"}]

DEFAULT_QUERY = "capcut editing tutorial hindi"

QUICK_PROMPTS = [
    "premiere pro cinematic edit",
    "mobile vlog editing tutorial",
    "kinemaster gaming montage",
    "capcut trending reels idea",
    "after effects motion graphics basic",
    "vn app smooth transitions hindi",
]


class DiscoveryPipeline:
    """Search YouTube for editing tutorials or shorts."""

    def __init__(self, config: DiscoveryConfig, provider: Optional[SearchProvider] = None):
        self.config = config
        self.provider = provider or create_provider(config.search, config.scraping)

    def build_query(self, query: str, mode: SearchMode) -> str:
        search = self.config.search
        return augment_query(
            query,
            mode,
            tutorial_suffix=search.tutorial_suffix,
            shorts_suffix=search.shorts_suffix,
            tutorial_keywords=search.tutorial_keywords,
        )

    async def search(
        self, query: Optional[str], mode: SearchMode = SearchMode.TUTORIALS
    ) -> SearchResponse:
        """Run one discovery request.

        Raises MissingQueryError for a blank query (the provider is not
        called) and ProviderError when the provider fails.
        """
        query = (query or "").strip()
        if not query:
            raise MissingQueryError()

        search_query = self.build_query(query, mode)
        logger.info(f"Searching {mode.value} for '{query}' (provider query: '{search_query}')")

        start_time = time.time()
        try:
            raw_items = await self.provider.get_list_by_keyword(
                search_query,
                False,
                self.config.search.max_results,
                VIDEO_ONLY_OPTIONS,
            )
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(str(e)) from e

        videos = normalize_items(raw_items)
        results = filter_videos(videos, mode, self.config.search.max_short_seconds)

        logger.info(
            f"Found {len(results)} {mode.value} for '{query}' "
            f"({len(raw_items or [])} raw, {len(videos)} videos) in {time.time() - start_time:.2f}s"
        )
        return SearchResponse(query=query, type=mode, results=results)

    async def close(self) -> None:
        await self.provider.close()
