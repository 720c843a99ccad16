"""Utilities and helper functions."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .models import VideoRecord


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = "editfinder.log",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 3,
    console_output: bool = True,
) -> None:
    """Setup logging configuration.

    Parameters
    ----------
    level: int
        Logging level.
    log_file: str, optional
        Path to the log file. ``None`` disables file logging.
    max_bytes: int
        Maximum size in bytes before rotating the log file.
    backup_count: int
        Number of rotated log files to keep.
    console_output: bool
        Whether to also log to the console.
    """

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if console_output:
        # stderr keeps stdout clean for JSON output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("yt_dlp").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def parse_duration(label: Optional[str]) -> Optional[int]:
    """Parse a duration label such as '3:45' or '1:02:03' into seconds.

    Segments are folded most-significant first, so one, two and three
    segment labels all work. Returns None for a missing label or when any
    segment is not an integer. Out-of-range segments are not rejected.
    """
    if not label:
        return None

    total = 0
    for part in label.split(":"):
        try:
            value = int(part, 10)
        except ValueError:
            return None
        total = total * 60 + value
    return total


def format_duration(seconds: int) -> str:
    """Format seconds into a provider style label (M:SS or H:MM:SS)."""
    if seconds < 0:
        return "0:00"
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02}:{seconds:02}"
    return f"{minutes}:{seconds:02}"


def watch_time_label(video: "VideoRecord") -> str:
    """Short caption describing how long a video takes to watch."""
    if video.duration_seconds:
        minutes = int(video.duration_seconds / 60 + 0.5)  # half-up, not banker's rounding
        return f"{max(1, minutes)} min watch"
    if video.is_live:
        return "Live Session"
    return "Flexible length"


def dig(value: Any, *path: Any) -> Any:
    """Walk nested dicts/lists, returning None as soon as a step is missing.

    Integer steps index lists (negative indexes allowed), anything else is
    a dict key. Values of the wrong type along the way also yield None.
    """
    for key in path:
        if isinstance(key, int):
            if not isinstance(value, list) or not -len(value) <= key < len(value):
                return None
        elif not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value
