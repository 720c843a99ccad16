"""Pytest configuration and fixtures for editfinder tests."""

import copy
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from editfinder.config import DiscoveryConfig
from editfinder.search.providers import SearchProvider

SAMPLE_RAW_ITEM = {
    "id": "abc123XYZ",
    "type": "video",
    "title": "CapCut Smooth Transition Tutorial",
    "channelTitle": "Edit Lab",
    "thumbnail": {
        "thumbnails": [
            {"url": "https://i.ytimg.com/vi/abc123XYZ/hqdefault.jpg", "width": 360, "height": 202},
            {"url": "https://i.ytimg.com/vi/abc123XYZ/hq720.jpg", "width": 720, "height": 404},
        ]
    },
    "shortBylineText": {
        "runs": [
            {
                "text": "Edit Lab",
                "navigationEndpoint": {
                    "browseEndpoint": {"browseId": "UCeditlab", "canonicalBaseUrl": "/@editlab"},
                    "commandMetadata": {"webCommandMetadata": {"url": "/@editlab"}},
                },
            }
        ]
    },
    "length": {
        "simpleText": "12:34",
        "accessibility": {"accessibilityData": {"label": "12 minutes, 34 seconds"}},
    },
    "isLive": False,
}


def make_raw_item(**overrides) -> Dict:
    """Copy of the sample raw item with top-level fields replaced."""
    item = copy.deepcopy(SAMPLE_RAW_ITEM)
    item.update(overrides)
    return item


def with_duration(video_id: str, label: Optional[str], is_live: bool = False) -> Dict:
    length = {"simpleText": label} if label is not None else None
    return make_raw_item(id=video_id, length=length, isLive=is_live)


class FakeSearchProvider(SearchProvider):
    """Provider returning canned raw items and recording its calls."""

    def __init__(self, items: Optional[List[Dict]] = None, error: Optional[Exception] = None):
        super().__init__()
        self.items = items or []
        self.error = error
        self.calls = []
        self.closed = False

    async def get_list_by_keyword(self, keyword, playlist=False, limit=30, options=None):
        self.calls.append(
            {"keyword": keyword, "playlist": playlist, "limit": limit, "options": options}
        )
        if self.error is not None:
            raise self.error
        return list(self.items)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def raw_item():
    """A complete raw video item."""
    return make_raw_item()


@pytest.fixture
def config():
    """Default configuration with file logging disabled."""
    cfg = DiscoveryConfig()
    cfg.logging.file_path = ""
    return cfg


@pytest.fixture
def fake_provider():
    """Provider with a mix of tutorial, short, live and non-video items."""
    return FakeSearchProvider(
        [
            with_duration("long1", "12:34"),
            with_duration("short60", "1:00"),
            with_duration("short105", "1:45"),
            with_duration("live1", None, is_live=True),
            with_duration("unknown", None),
            make_raw_item(id="plist", type="playlist"),
            make_raw_item(id=None),
        ]
    )
