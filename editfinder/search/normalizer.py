"""Normalization of raw provider items into VideoRecord instances.

Provider items are semi-structured dictionaries in which any field may be
missing or have an unexpected type. Every access here goes through
``dig`` so a malformed item degrades to ``None`` fields (or is skipped
entirely) instead of raising.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..models import VideoRecord
from ..utils import dig, parse_duration

logger = logging.getLogger(__name__)

VIDEO_TYPE = "video"
DEFAULT_TITLE = "Untitled"
DEFAULT_CHANNEL_TITLE = "Unknown creator"


def _text(value: Any) -> Optional[str]:
    """Return value only when it is a non-empty string."""
    if isinstance(value, str) and value:
        return value
    return None


def normalize_item(raw: Any) -> Optional[VideoRecord]:
    """Convert one raw provider item into a VideoRecord.

    Returns None for anything that isn't a displayable video: missing
    items, playlists, channels, ads and items without an id.
    """
    if not isinstance(raw, dict):
        return None
    if raw.get("type") != VIDEO_TYPE:
        logger.debug(f"Skipping non-video item of type {raw.get('type')!r}")
        return None

    video_id = _text(raw.get("id"))
    if video_id is None:
        logger.debug("Skipping video item without an id")
        return None

    # Only the first byline run carries the channel link
    endpoint = dig(raw, "shortBylineText", "runs", 0, "navigationEndpoint")
    channel_id = _text(dig(endpoint, "browseEndpoint", "browseId"))
    channel_url = _text(dig(endpoint, "commandMetadata", "webCommandMetadata", "url"))

    # Thumbnails come in ascending resolution order
    thumbnail = _text(dig(raw, "thumbnail", "thumbnails", -1, "url"))

    duration_label = _text(dig(raw, "length", "simpleText"))

    return VideoRecord(
        id=video_id,
        title=_text(raw.get("title")) or DEFAULT_TITLE,
        channel_title=_text(raw.get("channelTitle")) or DEFAULT_CHANNEL_TITLE,
        channel_id=channel_id,
        channel_url=channel_url,
        thumbnail=thumbnail,
        duration_label=duration_label,
        duration_seconds=parse_duration(duration_label),
        is_live=bool(raw.get("isLive")),
    )


def normalize_items(items: Optional[Iterable[Any]]) -> List[VideoRecord]:
    """Normalize a list of raw items, dropping the ones that aren't videos."""
    videos = []
    for item in items or []:
        video = normalize_item(item)
        if video is not None:
            videos.append(video)
    return videos
