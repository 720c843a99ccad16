"""Data models for normalized search results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

YOUTUBE_BASE_URL = "https://www.youtube.com"


class SearchMode(str, Enum):
    """Discovery intent requested by the user."""

    TUTORIALS = "tutorials"
    SHORTS = "shorts"

    @classmethod
    def from_param(cls, value: Optional[str]) -> "SearchMode":
        """Resolve a raw ``type`` parameter; only the literal "shorts" selects shorts."""
        if value == cls.SHORTS.value:
            return cls.SHORTS
        return cls.TUTORIALS


@dataclass(frozen=True)
class VideoRecord:
    """Normalized representation of one provider video."""

    id: str
    title: str
    channel_title: str
    channel_id: Optional[str] = None
    channel_url: Optional[str] = None
    thumbnail: Optional[str] = None
    duration_label: Optional[str] = None
    duration_seconds: Optional[int] = None
    is_live: bool = False

    @property
    def watch_url(self) -> str:
        return f"{YOUTUBE_BASE_URL}/watch?v={self.id}"

    @property
    def channel_link(self) -> Optional[str]:
        """Absolute channel link, preferring the channel path over the id."""
        if self.channel_url:
            if self.channel_url.startswith("http"):
                return self.channel_url
            return f"{YOUTUBE_BASE_URL}{self.channel_url}"
        if self.channel_id:
            return f"{YOUTUBE_BASE_URL}/channel/{self.channel_id}"
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "channelTitle": self.channel_title,
            "channelId": self.channel_id,
            "channelUrl": self.channel_url,
            "thumbnail": self.thumbnail,
            "durationLabel": self.duration_label,
            "durationSeconds": self.duration_seconds,
            "isLive": self.is_live,
        }


@dataclass
class SearchResponse:
    """Payload returned for one search request."""

    query: str
    type: SearchMode
    results: List[VideoRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "type": self.type.value,
            "total": self.total,
            "results": [video.to_dict() for video in self.results],
        }
