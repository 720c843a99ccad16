"""
Editing Video Discovery

Search YouTube for video-editing tutorials or short-form clips and get
back normalized, filtered results.
"""

__version__ = "1.0.0"

from .config import DiscoveryConfig, load_config
from .models import SearchMode, SearchResponse, VideoRecord
from .pipeline import DiscoveryPipeline

__all__ = [
    "DiscoveryConfig",
    "DiscoveryPipeline",
    "SearchMode",
    "SearchResponse",
    "VideoRecord",
    "load_config",
]
