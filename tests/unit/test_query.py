"""Unit tests for search/query.py."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from editfinder.models import SearchMode
from editfinder.search.query import augment_query, has_editing_intent


class TestAugmentQuery:
    """Test cases for augment_query."""

    def test_tutorials_appends_suffix(self):
        assert (
            augment_query("capcut transition", SearchMode.TUTORIALS)
            == "capcut transition editing tutorial"
        )

    @pytest.mark.parametrize(
        "query",
        ["premiere pro cinematic edit", "Mobile Vlog EDITING", "After Effects Tutorial", "tutorials"],
    )
    def test_tutorials_keeps_query_with_intent(self, query):
        assert augment_query(query, SearchMode.TUTORIALS) == query

    def test_shorts_always_appends_suffix(self):
        assert augment_query("vlog tips", SearchMode.SHORTS) == "vlog tips vertical video"
        assert (
            augment_query("capcut edit tutorial", SearchMode.SHORTS)
            == "capcut edit tutorial vertical video"
        )

    def test_custom_suffixes(self):
        assert (
            augment_query("color grading", SearchMode.TUTORIALS, tutorial_suffix="walkthrough")
            == "color grading walkthrough"
        )
        assert augment_query("hooks", SearchMode.SHORTS, shorts_suffix="#shorts") == "hooks #shorts"

    def test_custom_keywords(self):
        assert augment_query("davinci guide", SearchMode.TUTORIALS, tutorial_keywords=["guide"]) == (
            "davinci guide"
        )


class TestHasEditingIntent:
    """Test cases for has_editing_intent."""

    def test_substring_match(self):
        assert has_editing_intent("video editor tricks")
        assert has_editing_intent("TUTORIAL")
        assert not has_editing_intent("vlog tips")

    def test_keywords_match_case_insensitively(self):
        assert has_editing_intent("Premiere EDIT pack", ["Edit"])
        assert not has_editing_intent("vlog tips", ["Edit"])
