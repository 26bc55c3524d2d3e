"""
Tests for the HTTP API.

Crawlers and the pipeline are swapped through FastAPI dependency overrides.
"""
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes import (
    get_news_crawler,
    get_pipeline,
    get_polymarket_crawler,
    get_reddit_crawler,
    get_twitter_crawler,
)
from crawlers import NewsCrawler, RedditCrawler, TwitterCrawler
from processor.config import build_matching_config
from processor.pipeline import SimilarEventsPipeline


NEWS_ARTICLES = [
    {
        "title": "FDA expected to approve new drug by March 2025",
        "description": "The drug treats a rare medical condition",
        "url": "https://example.com/fda-drug",
        "source": {"name": "Reuters"},
        "publishedAt": "2025-03-01T10:00:00Z",
    },
    {
        "title": "FDA expected to approve new drug by March 2025!",
        "description": "The drug treats a rare medical condition",
        "url": "https://example.com/fda-drug-copy",
        "source": {"name": "Wire"},
        "publishedAt": "2025-03-01T09:00:00Z",
    },
    {
        "title": "Local bakery opens a second shop",
        "description": "Fresh bread daily",
        "url": "https://example.com/bakery",
        "source": {"name": "Town Paper"},
        "publishedAt": "2025-03-01T08:00:00Z",
    },
]


class FakePolymarketCrawler:
    def __init__(self, pool):
        self.pool = pool

    async def get_pool(self):
        return list(self.pool)


def _news_crawler(payload, requests=None) -> NewsCrawler:
    def handler(request):
        if requests is not None:
            requests.append(request)
        return httpx.Response(200, json=payload)
    return NewsCrawler(api_key="key", api_base="https://news.test/v2", transport=httpx.MockTransport(handler))


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").status_code == 200


class TestPolymarketEvents:
    """Tests for /api/polymarket/events."""

    def test_no_keywords(self, client):
        app.dependency_overrides[get_polymarket_crawler] = lambda: FakePolymarketCrawler([])
        response = client.get("/api/polymarket/events")
        assert response.status_code == 200
        assert response.json() == {"events": [], "message": "No keywords provided"}

    def test_similar_events(self, client, nhl_event, valorant_event):
        app.dependency_overrides[get_polymarket_crawler] = lambda: FakePolymarketCrawler([valorant_event, nhl_event])
        app.dependency_overrides[get_pipeline] = lambda: SimilarEventsPipeline(config=build_matching_config())

        response = client.get(
            "/api/polymarket/events",
            params={"title": "Rangers advance in NHL playoffs", "category": "Gaming", "limit": 5},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["events"][0]["title"] == nhl_event.title
        assert data["events"][0]["url"] == "https://polymarket.com/event/rangers-stanley-cup"

    def test_pipeline_error(self, client, nhl_event):
        pipeline = MagicMock()
        pipeline.config = build_matching_config()
        pipeline.find_similar_events.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_polymarket_crawler] = lambda: FakePolymarketCrawler([nhl_event])
        app.dependency_overrides[get_pipeline] = lambda: pipeline

        response = client.get("/api/polymarket/events", params={"title": "Rangers advance"})
        assert response.status_code == 500
        assert response.json() == {"events": [], "error": "boom"}

    def test_limit_validated(self, client):
        app.dependency_overrides[get_polymarket_crawler] = lambda: FakePolymarketCrawler([])
        response = client.get("/api/polymarket/events", params={"title": "x", "limit": 0})
        assert response.status_code == 422


class TestMarketableTrends:
    """Tests for /api/trends/marketable."""

    def test_not_configured(self, client):
        app.dependency_overrides[get_news_crawler] = lambda: NewsCrawler(api_key="")
        response = client.get("/api/trends/marketable", params={"interests": "Healthcare"})
        assert response.json() == {"events": [], "message": "NewsAPI key not configured"}

    def test_marketable_events(self, client):
        requests = []
        crawler = _news_crawler({"status": "ok", "articles": NEWS_ARTICLES[:1] + NEWS_ARTICLES[2:]}, requests)
        app.dependency_overrides[get_news_crawler] = lambda: crawler

        response = client.get("/api/trends/marketable", params={"interests": "Healthcare"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        event = data["events"][0]
        assert event["eventType"] == "Regulatory Decision"
        assert event["marketabilityScore"] == 75
        assert event["category"] == "Healthcare"
        assert event["id"].startswith("marketable-fda-drug-")
        assert requests[0].url.params["q"] == "FDA approval OR drug approval OR clinical trial"

    def test_no_interests(self, client):
        app.dependency_overrides[get_news_crawler] = lambda: _news_crawler({"status": "ok", "articles": NEWS_ARTICLES})
        data = client.get("/api/trends/marketable").json()
        assert data["events"] == []
        assert data["total"] == 0


class TestNews:
    """Tests for /api/news."""

    def test_filtered_and_deduplicated(self, client):
        requests = []
        app.dependency_overrides[get_news_crawler] = lambda: _news_crawler(
            {"status": "ok", "articles": NEWS_ARTICLES}, requests
        )

        response = client.get("/api/news", params={"interests": "Healthcare"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["filtered"] is True
        trend = data["trends"][0]
        assert trend["category"] == "Healthcare"
        assert trend["isMarketable"] is True
        assert requests[0].url.params["q"].startswith("healthcare OR medical")

    def test_default_query(self, client):
        requests = []
        app.dependency_overrides[get_news_crawler] = lambda: _news_crawler(
            {"status": "ok", "articles": NEWS_ARTICLES}, requests
        )

        data = client.get("/api/news").json()
        assert requests[0].url.params["q"] == "technology"
        assert data["filtered"] is False
        assert data["total"] == 2

    def test_upstream_error(self, client):
        app.dependency_overrides[get_news_crawler] = lambda: _news_crawler({"status": "error", "message": "bad key"})
        response = client.get("/api/news")
        assert response.status_code == 500
        assert response.json()["trends"] == []
        assert "bad key" in response.json()["error"]


PREDICT_ARTICLES = [
    {
        "title": "OpenAI will release GPT-5 by June 2025",
        "description": "The launch decision is near",
        "url": "https://example.com/gpt5",
        "source": {"name": "Reuters"},
        "publishedAt": "2025-03-01T10:00:00Z",
    },
]

REDDIT_LISTING = {
    "data": {
        "children": [
            {
                "kind": "t3",
                "data": {
                    "id": "abc123",
                    "title": "Senate to vote on AI safety bill by June 2025",
                    "selftext": "",
                    "permalink": "/r/artificial/comments/abc123/",
                    "subreddit": "artificial",
                    "created_utc": 1740830400,
                    "score": 640,
                    "num_comments": 75,
                },
            },
        ]
    }
}


class ExplodingPolymarketCrawler:
    async def get_pool(self):
        raise RuntimeError("gamma down")


def _reddit_crawler(requests=None) -> RedditCrawler:
    def handler(request):
        if requests is not None:
            requests.append(request)
        return httpx.Response(200, json=REDDIT_LISTING)
    return RedditCrawler(api_base="https://reddit.test", transport=httpx.MockTransport(handler))


class TestPredictedTrends:
    """Tests for /api/trends/predict."""

    @pytest.fixture
    def sources(self, make_event):
        news_requests, reddit_requests = [], []
        pool = [
            make_event("1", "Will an AI model top the LMSYS arena by July?", liquidity=20000, slug="arena"),
            make_event("2", "AI token price above $1?", liquidity=99999),
        ]
        app.dependency_overrides[get_polymarket_crawler] = lambda: FakePolymarketCrawler(pool)
        app.dependency_overrides[get_news_crawler] = lambda: _news_crawler(
            {"status": "ok", "articles": PREDICT_ARTICLES}, news_requests
        )
        app.dependency_overrides[get_reddit_crawler] = lambda: _reddit_crawler(reddit_requests)
        app.dependency_overrides[get_twitter_crawler] = lambda: TwitterCrawler(bearer_token="")
        return news_requests, reddit_requests

    def test_markets_social_and_news(self, client, sources):
        news_requests, reddit_requests = sources

        response = client.get("/api/trends/predict", params={"interests": "AI,Astrology"})

        assert response.status_code == 200
        data = response.json()
        assert data["interests"] == ["AI", "Astrology"]
        assert data["total"] == 3
        assert data["trends"][0]["origin"] == "market"
        assert data["trends"][0]["title"] == "Will an AI model top the LMSYS arena by July?"
        assert {t["origin"] for t in data["trends"]} == {"market", "social", "prediction"}

        social = next(t for t in data["trends"] if t["origin"] == "social")
        assert social["isMarketable"] is True
        assert social["eventType"] == "Policy Decision"
        assert social["engagement"] == {"upvotes": 640, "comments": 75}

        prediction = next(t for t in data["trends"] if t["origin"] == "prediction")
        assert prediction["title"] == "Will release GPT-5 by June 2025?"

        assert news_requests[0].url.params["q"].startswith("artificial intelligence OR AI OR")
        assert reddit_requests[0].url.path == "/r/artificial+MachineLearning+ChatGPT/search.json"
        assert reddit_requests[0].url.params["q"] == "artificial intelligence OR AI OR machine learning"

    def test_unknown_interests_only(self, client, sources):
        data = client.get("/api/trends/predict", params={"interests": "Astrology"}).json()
        assert data == {"trends": [], "total": 0, "interests": ["Astrology"]}

    def test_no_interests(self, client, sources):
        data = client.get("/api/trends/predict").json()
        assert data == {"trends": [], "message": "Please select interests to generate predictions"}

    def test_not_configured(self, client, sources):
        app.dependency_overrides[get_news_crawler] = lambda: NewsCrawler(api_key="")
        data = client.get("/api/trends/predict", params={"interests": "AI"}).json()
        assert data == {"trends": [], "message": "NewsAPI key not configured"}

    def test_truncated_to_twenty(self, client, make_event):
        words = iter([
            "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel",
            "india", "juliet", "kilo", "lima", "mike", "november", "oscar", "papa",
            "quebec", "romeo", "sierra", "tango", "uniform", "victor", "whiskey",
            "xray", "yankee", "zulu", "amber", "cobalt", "falcon", "harbor",
        ])
        keywords = ["ai", "policy", "chip", "banking", "retail", "medical", "solar", "ethereum", "carbon", "nintendo"]
        pool = [
            make_event(f"{keyword}-{i}", f"{keyword} milestone {next(words)}")
            for keyword in keywords for i in range(3)
        ]
        app.dependency_overrides[get_polymarket_crawler] = lambda: FakePolymarketCrawler(pool)
        app.dependency_overrides[get_news_crawler] = lambda: _news_crawler({"status": "ok", "articles": []})
        app.dependency_overrides[get_reddit_crawler] = lambda: RedditCrawler(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {"children": []}}))
        )
        app.dependency_overrides[get_twitter_crawler] = lambda: TwitterCrawler(bearer_token="")
        interests = "AI,Policy,Semiconductors,Finance,E-commerce,Healthcare,Energy,Crypto,Climate,Gaming"

        data = client.get("/api/trends/predict", params={"interests": interests}).json()

        assert len(data["trends"]) == 20
        assert data["total"] == 30
        assert {t["origin"] for t in data["trends"]} == {"market"}

    def test_pool_error(self, client, sources):
        app.dependency_overrides[get_polymarket_crawler] = lambda: ExplodingPolymarketCrawler()
        response = client.get("/api/trends/predict", params={"interests": "AI"})
        assert response.status_code == 500
        assert response.json() == {"trends": [], "error": "gamma down"}
