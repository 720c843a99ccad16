"""YouTube search provider that reads the results page's initial data."""

import json
import random
import re
from typing import Any, Dict, List, Optional

import httpx

from ...config import ScrapingConfig, SearchConfig
from ...utils import dig
from .base import RawItem, SearchProvider, SearchProviderError

RESULTS_URL = "https://www.youtube.com/results"

# "sp" search filter that limits the results page to videos
VIDEO_FILTER_PARAM = "EgIQAQ=="

INITIAL_DATA_PATTERN = re.compile(r"var ytInitialData = (\{.*?\});</script>", re.DOTALL)

LIVE_BADGE_STYLE = "BADGE_STYLE_TYPE_LIVE_NOW"
LIVE_OVERLAY_STYLE = "LIVE"


class InnertubeSearchProvider(SearchProvider):
    """Scrapes ``ytInitialData`` from the YouTube results page."""

    def __init__(
        self,
        search_config: SearchConfig,
        scraping_config: ScrapingConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(search_config)
        self.search_config = search_config
        self.scraping_config = scraping_config
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.scraping_config.timeout_seconds,
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def get_list_by_keyword(
        self,
        keyword: str,
        playlist: bool = False,
        limit: int = 30,
        options: Optional[List[Dict[str, str]]] = None,
    ) -> List[RawItem]:
        """Fetch the results page for ``keyword`` and return raw items."""
        allowed = self.allowed_types(options)

        html = await self._fetch_results_page(keyword, videos_only=allowed == {"video"})
        initial_data = self._extract_initial_data(html)
        items = self._parse_items(initial_data, playlist)

        if allowed is not None:
            items = [item for item in items if item.get("type") in allowed]
        items = items[:limit]

        self.logger.debug(f"Parsed {len(items)} items for keyword: '{keyword}'")
        return items

    async def _fetch_results_page(self, keyword: str, videos_only: bool) -> str:
        params = {
            "search_query": keyword,
            "hl": self.search_config.language,
            "gl": self.search_config.region,
        }
        if videos_only:
            params["sp"] = VIDEO_FILTER_PARAM
        headers = {
            "User-Agent": random.choice(self.scraping_config.user_agents),
            "Accept-Language": f"{self.search_config.language},en;q=0.8",
        }

        try:
            response = await self._get_client().get(RESULTS_URL, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SearchProviderError(
                f"YouTube search returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise SearchProviderError(f"YouTube search request failed: {e}") from e

        return response.text

    def _extract_initial_data(self, html: str) -> Dict[str, Any]:
        match = INITIAL_DATA_PATTERN.search(html)
        if not match:
            raise SearchProviderError("Could not find search data in YouTube response")
        try:
            data = json.loads(match.group(1))
        except json.JSONDecodeError as e:
            raise SearchProviderError(f"Malformed search data in YouTube response: {e}") from e
        if not isinstance(data, dict):
            raise SearchProviderError("Malformed search data in YouTube response")
        return data

    def _parse_items(self, initial_data: Dict[str, Any], playlist: bool) -> List[RawItem]:
        sections = dig(
            initial_data,
            "contents",
            "twoColumnSearchResultsRenderer",
            "primaryContents",
            "sectionListRenderer",
            "contents",
        ) or []

        items: List[RawItem] = []
        for section in sections:
            for content in dig(section, "itemSectionRenderer", "contents") or []:
                video = dig(content, "videoRenderer")
                playlist_renderer = dig(content, "playlistRenderer")
                if isinstance(video, dict):
                    items.append(self._parse_video_renderer(video))
                elif playlist and isinstance(playlist_renderer, dict):
                    items.append(self._parse_playlist_renderer(playlist_renderer))
        return items

    @staticmethod
    def _first_run_text(value: Any) -> Optional[str]:
        text = dig(value, "runs", 0, "text")
        if text is None:
            text = dig(value, "simpleText")
        return text

    def _parse_video_renderer(self, renderer: Dict[str, Any]) -> RawItem:
        return {
            "id": renderer.get("videoId"),
            "type": "video",
            "thumbnail": renderer.get("thumbnail"),
            "title": self._first_run_text(renderer.get("title")),
            "channelTitle": self._first_run_text(renderer.get("ownerText")),
            "shortBylineText": renderer.get("shortBylineText"),
            "length": renderer.get("lengthText"),
            "isLive": self._is_live(renderer),
        }

    def _parse_playlist_renderer(self, renderer: Dict[str, Any]) -> RawItem:
        return {
            "id": renderer.get("playlistId"),
            "type": "playlist",
            "thumbnail": dig(renderer, "thumbnails", 0),
            "title": self._first_run_text(renderer.get("title")),
            "length": renderer.get("videoCount"),
            "isLive": False,
        }

    @staticmethod
    def _is_live(renderer: Dict[str, Any]) -> bool:
        for badge in renderer.get("badges") or []:
            style = dig(badge, "metadataBadgeRenderer", "style")
            if style == LIVE_BADGE_STYLE:
                return True
        for overlay in renderer.get("thumbnailOverlays") or []:
            status = dig(overlay, "thumbnailOverlayTimeStatusRenderer", "style")
            if status == LIVE_OVERLAY_STYLE:
                return True
        return False
