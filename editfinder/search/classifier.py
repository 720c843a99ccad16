"""Tutorial and short-form classification of normalized videos."""

from typing import Iterable, List

from ..models import SearchMode, VideoRecord

MAX_SHORT_SECONDS = 90


def is_tutorial(video: VideoRecord) -> bool:
    """Tutorials may be any length, but live sessions are not pre-produced."""
    return not video.is_live


def is_short(video: VideoRecord, max_seconds: int = MAX_SHORT_SECONDS) -> bool:
    """A short must be non-live with a known duration within the limit."""
    if video.is_live:
        return False
    if video.duration_seconds is None:
        return False
    return video.duration_seconds <= max_seconds


def filter_videos(
    videos: Iterable[VideoRecord],
    mode: SearchMode,
    max_short_seconds: int = MAX_SHORT_SECONDS,
) -> List[VideoRecord]:
    """Keep the videos matching the mode, preserving provider order."""
    if mode == SearchMode.SHORTS:
        return [video for video in videos if is_short(video, max_short_seconds)]
    return [video for video in videos if is_tutorial(video)]
