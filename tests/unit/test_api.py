"""Unit tests for the HTTP API."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from conftest import FakeSearchProvider, with_duration

from editfinder.api import create_app
from editfinder.pipeline import DEFAULT_QUERY, QUICK_PROMPTS
from editfinder.search.providers import SearchProviderError


@pytest.fixture
def make_client(config):
    def _make(provider):
        return TestClient(create_app(config, provider))

    return _make


class TestSearchEndpoint:
    """Test cases for GET /api/search."""

    def test_tutorials_by_default(self, make_client, fake_provider):
        response = make_client(fake_provider).get("/api/search", params={"q": "capcut transition"})

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "capcut transition"
        assert body["type"] == "tutorials"
        assert body["total"] == 4
        assert [video["id"] for video in body["results"]] == [
            "long1",
            "short60",
            "short105",
            "unknown",
        ]
        assert fake_provider.calls[0]["keyword"] == "capcut transition editing tutorial"

    def test_result_shape(self, make_client, fake_provider):
        body = make_client(fake_provider).get("/api/search", params={"q": "capcut"}).json()

        assert body["results"][0] == {
            "id": "long1",
            "title": "CapCut Smooth Transition Tutorial",
            "channelTitle": "Edit Lab",
            "channelId": "UCeditlab",
            "channelUrl": "/@editlab",
            "thumbnail": "https://i.ytimg.com/vi/abc123XYZ/hq720.jpg",
            "durationLabel": "12:34",
            "durationSeconds": 754,
            "isLive": False,
        }

    def test_shorts(self, make_client):
        provider = FakeSearchProvider([with_duration("a", "1:45"), with_duration("b", "1:00")])

        response = make_client(provider).get(
            "/api/search", params={"q": " vlog tips ", "type": "shorts"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "vlog tips"
        assert body["type"] == "shorts"
        assert body["total"] == 1
        assert body["results"][0]["id"] == "b"
        assert provider.calls[0]["keyword"] == "vlog tips vertical video"

    def test_unknown_type_means_tutorials(self, make_client, fake_provider):
        body = (
            make_client(fake_provider)
            .get("/api/search", params={"q": "capcut", "type": "SHORTS"})
            .json()
        )
        assert body["type"] == "tutorials"

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_missing_query(self, make_client, params):
        provider = FakeSearchProvider()

        response = make_client(provider).get("/api/search", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing search query"}
        assert provider.calls == []

    def test_provider_failure(self, make_client):
        provider = FakeSearchProvider(error=SearchProviderError("YouTube search returned HTTP 503"))

        response = make_client(provider).get("/api/search", params={"q": "capcut"})

        assert response.status_code == 500
        assert response.json() == {"error": "YouTube search returned HTTP 503"}

    def test_provider_failure_without_message(self, make_client):
        provider = FakeSearchProvider(error=RuntimeError())

        response = make_client(provider).get("/api/search", params={"q": "capcut"})

        assert response.status_code == 500
        assert response.json() == {"error": "Unexpected error occurred"}


class TestAuxiliaryEndpoints:
    """Test cases for prompts and health endpoints."""

    def test_prompts(self, make_client):
        body = make_client(FakeSearchProvider()).get("/api/prompts").json()
        assert body == {"default": DEFAULT_QUERY, "prompts": QUICK_PROMPTS}

    def test_health(self, make_client):
        body = make_client(FakeSearchProvider()).get("/api/health").json()
        assert body == {"status": "ok", "provider": "innertube"}

    def test_lifespan_closes_provider(self, config):
        provider = FakeSearchProvider()
        with TestClient(create_app(config, provider)) as client:
            assert client.get("/api/health").status_code == 200
            assert not provider.closed
        assert provider.closed
