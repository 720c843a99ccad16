"""Mode-specific query augmentation."""

from typing import Iterable

from ..models import SearchMode

TUTORIAL_SUFFIX = "editing tutorial"
SHORTS_SUFFIX = "vertical video"
TUTORIAL_KEYWORDS = ("edit", "tutorial")


def has_editing_intent(query: str, keywords: Iterable[str] = TUTORIAL_KEYWORDS) -> bool:
    """Check whether the user already asked for editing/tutorial content."""
    query_lower = query.lower()
    return any(keyword.lower() in query_lower for keyword in keywords)


def augment_query(
    query: str,
    mode: SearchMode,
    tutorial_suffix: str = TUTORIAL_SUFFIX,
    shorts_suffix: str = SHORTS_SUFFIX,
    tutorial_keywords: Iterable[str] = TUTORIAL_KEYWORDS,
) -> str:
    """Build the provider-facing search string for a mode.

    Shorts always get the vertical video bias. Tutorials only get the
    editing suffix when the query doesn't already mention editing or
    tutorials.
    """
    if mode == SearchMode.SHORTS:
        return f"{query} {shorts_suffix}"

    if has_editing_intent(query, tutorial_keywords):
        return query
    return f"{query} {tutorial_suffix}"
