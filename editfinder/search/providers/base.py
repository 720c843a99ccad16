"""Base interface for search providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ...exceptions import ProviderError

logger = logging.getLogger(__name__)

# A raw item is a loosely typed dictionary in the shape of YouTube's search
# results: {"id", "type", "title", "channelTitle", "thumbnail": {"thumbnails"},
# "shortBylineText": {"runs"}, "length": {"simpleText"}, "isLive"}.
RawItem = Dict[str, Any]


class SearchProviderError(ProviderError):
    """Raised when a provider cannot complete a search."""


class SearchProvider(ABC):
    """Abstract base class for all search providers."""

    def __init__(self, config=None):
        self.config = config
        self.provider_name = self.__class__.__name__.replace("SearchProvider", "").lower()
        self.logger = logging.getLogger(f"{__name__}.{self.provider_name}")

    @abstractmethod
    async def get_list_by_keyword(
        self,
        keyword: str,
        playlist: bool = False,
        limit: int = 30,
        options: Optional[List[Dict[str, str]]] = None,
    ) -> List[RawItem]:
        """Search by keyword and return raw items.

        ``options`` restricts the item types returned, e.g.
        ``[{"type": "video"}]``. Failures raise SearchProviderError.
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the provider."""

    @staticmethod
    def allowed_types(options: Optional[List[Dict[str, str]]]) -> Optional[set]:
        """Collect the item types requested through ``options``; None means any."""
        if not options:
            return None
        types = {option.get("type") for option in options if option.get("type")}
        return types or None
