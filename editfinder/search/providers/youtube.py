"""YouTube search provider using yt-dlp."""

import asyncio
import random
from typing import Any, Dict, List, Optional

import yt_dlp

from ...config import ScrapingConfig, SearchConfig
from ...utils import format_duration
from .base import RawItem, SearchProvider, SearchProviderError

LIVE_STATUSES = {"is_live", "is_upcoming"}


class YtDlpSearchProvider(SearchProvider):
    """Runs flat ``ytsearch`` extractions and adapts entries to raw items."""

    def __init__(self, search_config: SearchConfig, scraping_config: ScrapingConfig):
        super().__init__(search_config)
        self.search_config = search_config
        self.scraping_config = scraping_config
        self.yt_dlp_opts = self._setup_yt_dlp()

    def _setup_yt_dlp(self) -> Dict:
        """Setup yt-dlp configuration."""
        return {
            "quiet": True,
            "no_warnings": True,
            "extract_flat": True,
            "skip_download": True,
            "socket_timeout": self.scraping_config.timeout_seconds,
        }

    async def get_list_by_keyword(
        self,
        keyword: str,
        playlist: bool = False,
        limit: int = 30,
        options: Optional[List[Dict[str, str]]] = None,
    ) -> List[RawItem]:
        """Search with yt-dlp. ``ytsearch`` only yields videos, so ``playlist`` has no effect."""
        search_query = f"ytsearch{limit}:{keyword}"
        opts = dict(self.yt_dlp_opts)
        opts["http_headers"] = {"User-Agent": random.choice(self.scraping_config.user_agents)}

        try:
            loop = asyncio.get_running_loop()
            info = await asyncio.wait_for(
                loop.run_in_executor(None, self._execute_search, search_query, opts),
                timeout=self.scraping_config.timeout_seconds * 4,
            )
        except asyncio.TimeoutError as e:
            raise SearchProviderError(f"yt-dlp search timed out for '{keyword}'") from e
        except yt_dlp.DownloadError as e:
            raise SearchProviderError(f"yt-dlp search failed: {e}") from e

        items = [self._entry_to_item(entry) for entry in info.get("entries") or [] if entry]

        allowed = self.allowed_types(options)
        if allowed is not None:
            items = [item for item in items if item.get("type") in allowed]
        return items[:limit]

    @staticmethod
    def _execute_search(search_query: str, opts: Dict) -> Dict:
        """Execute yt-dlp search in a worker thread."""
        with yt_dlp.YoutubeDL(opts) as ydl:
            info = ydl.extract_info(search_query, download=False)
            return info or {}

    @staticmethod
    def _entry_to_item(entry: Dict[str, Any]) -> RawItem:
        """Reshape a flat yt-dlp entry into the raw item layout."""
        duration = entry.get("duration")
        length = None
        if isinstance(duration, (int, float)) and duration >= 0:
            length = {"simpleText": format_duration(int(duration))}

        channel_url = entry.get("channel_url") or entry.get("uploader_url")
        navigation = {
            "browseEndpoint": {"browseId": entry.get("channel_id")},
            "commandMetadata": {"webCommandMetadata": {"url": channel_url}},
        }

        thumbnails = entry.get("thumbnails") or []
        thumbnails = sorted(
            (thumb for thumb in thumbnails if isinstance(thumb, dict) and thumb.get("url")),
            key=lambda thumb: (thumb.get("width") or 0) * (thumb.get("height") or 0),
        )

        return {
            "id": entry.get("id"),
            "type": "video" if entry.get("ie_key") in (None, "Youtube") else "other",
            "title": entry.get("title"),
            "channelTitle": entry.get("channel") or entry.get("uploader"),
            "shortBylineText": {"runs": [{"navigationEndpoint": navigation}]},
            "thumbnail": {"thumbnails": thumbnails},
            "length": length,
            "isLive": entry.get("live_status") in LIVE_STATUSES,
        }
