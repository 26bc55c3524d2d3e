"""
Social Crawlers - Reddit search and Twitter (X) recent search

Reddit's public search.json needs no key. Twitter needs
TWITTER_BEARER_TOKEN; without it every fetch fails and callers skip the
source.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

import httpx
from loguru import logger

from config import settings
from .base_crawler import BaseCrawler, CrawlResult, CrawlerError, parse_timestamp


MAX_TWEETS_PER_REQUEST = 100
MIN_TWEETS_PER_REQUEST = 10


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


@dataclass
class SocialPost:
    """A Reddit post or a tweet."""
    platform: str          # "reddit" or "twitter"
    post_id: str
    title: str             # post title; the tweet text for tweets
    text: str
    url: str
    author: str            # subreddit for Reddit, username for Twitter
    created_at: Optional[datetime] = None
    score: int = 0         # upvotes
    comments: int = 0
    likes: int = 0
    retweets: int = 0

    @classmethod
    def from_reddit(cls, record: dict) -> Optional["SocialPost"]:
        """Build from a search.json child ({"kind": "t3", "data": {...}})."""
        data = record.get("data") if isinstance(record, dict) else None
        if not isinstance(data, dict) or not data.get("id"):
            return None
        created = data.get("created_utc")
        created_at = None
        if isinstance(created, (int, float)):
            created_at = datetime.fromtimestamp(created, tz=timezone.utc)
        return cls(
            platform="reddit",
            post_id=str(data["id"]),
            title=data.get("title") or "",
            text=data.get("selftext") or "",
            url=f"https://reddit.com{data.get('permalink') or ''}",
            author=data.get("subreddit") or "",
            created_at=created_at,
            score=_int(data.get("score")),
            comments=_int(data.get("num_comments")),
        )

    @classmethod
    def from_tweet(cls, record: dict, users: dict) -> Optional["SocialPost"]:
        """Build from a v2 tweet object; users maps author_id -> user object."""
        if not isinstance(record, dict) or not record.get("id"):
            return None
        user = users.get(record.get("author_id")) or {}
        username = user.get("username") or "twitter"
        metrics = record.get("public_metrics") or {}
        text = record.get("text") or ""
        return cls(
            platform="twitter",
            post_id=str(record["id"]),
            title=text,
            text=text,
            url=f"https://twitter.com/{username}/status/{record['id']}",
            author=username,
            created_at=parse_timestamp(record.get("created_at")),
            likes=_int(metrics.get("like_count")),
            retweets=_int(metrics.get("retweet_count")),
        )

    @property
    def full_text(self) -> str:
        if self.platform == "twitter":
            return self.text
        return f"{self.title} {self.text}".strip()

    @property
    def engagement(self) -> dict:
        if self.platform == "reddit":
            return {"upvotes": self.score, "comments": self.comments}
        return {"retweets": self.retweets, "likes": self.likes}

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "id": self.post_id,
            "title": self.title,
            "text": self.text,
            "url": self.url,
            "author": self.author,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "engagement": self.engagement,
        }


def _done(name: str, posts: list) -> CrawlResult:
    return CrawlResult(
        source=name,
        crawled_at=datetime.now(timezone.utc),
        success=True,
        data=posts,
    )


class RedditCrawler(BaseCrawler):
    """Hot posts of the last day from Reddit search."""

    def __init__(
        self,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("reddit", timeout=timeout, transport=transport)
        self.api_base = (api_base or settings.REDDIT_API_BASE).rstrip("/")

    def search_url(self, subreddits: Sequence[str] = ()) -> str:
        if subreddits:
            return f"{self.api_base}/r/{'+'.join(subreddits)}/search.json"
        return f"{self.api_base}/search.json"

    async def fetch(self, query: str = "", subreddits: Sequence[str] = (), limit: int = 30, **kwargs) -> CrawlResult:
        """
        Search posts.

        Args:
            query: Reddit search expression (supports OR)
            subreddits: Restrict the search to these subreddits
            limit: Max posts requested
        """
        params = {"q": query, "sort": "hot", "limit": limit, "t": "day"}
        if subreddits:
            params["restrict_sr"] = "on"
        payload = await self.get_json(self.search_url(subreddits), params=params)

        children = (payload.get("data") or {}).get("children") if isinstance(payload, dict) else None
        if not isinstance(children, list):
            raise CrawlerError("Reddit returned no listing")

        posts = [p for p in (SocialPost.from_reddit(c) for c in children) if p is not None]
        logger.debug(f"[reddit] '{query[:60]}' -> {len(posts)} posts")
        return _done(self.name, posts)


class TwitterCrawler(BaseCrawler):
    """Recent English tweets (no retweets) from the v2 search API."""

    def __init__(
        self,
        bearer_token: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("twitter", timeout=timeout, transport=transport)
        self.bearer_token = settings.TWITTER_BEARER_TOKEN if bearer_token is None else bearer_token
        self.api_base = (api_base or settings.TWITTER_API_BASE).rstrip("/")
        if self.bearer_token:
            self.headers["Authorization"] = f"Bearer {self.bearer_token}"

    @property
    def is_configured(self) -> bool:
        return bool(self.bearer_token)

    async def fetch(self, query: str = "", limit: int = 30, **kwargs) -> CrawlResult:
        """
        Search tweets from the last seven days.

        Args:
            query: Twitter search expression; retweet and language filters are added
            limit: Max tweets requested (the API accepts 10-100)
        """
        if not self.is_configured:
            return self.failed("Twitter bearer token not configured")

        params = {
            "query": f"{query} -is:retweet lang:en",
            "max_results": max(MIN_TWEETS_PER_REQUEST, min(MAX_TWEETS_PER_REQUEST, limit)),
            "tweet.fields": "created_at,public_metrics,author_id",
            "expansions": "author_id",
            "user.fields": "username,name",
        }
        payload = await self.get_json(f"{self.api_base}/tweets/search/recent", params=params)
        if not isinstance(payload, dict):
            raise CrawlerError("Twitter returned an unexpected payload")
        if payload.get("errors") and not payload.get("data"):
            raise CrawlerError(f"Twitter returned errors: {payload['errors'][0]}")

        users = {
            user.get("id"): user
            for user in (payload.get("includes") or {}).get("users") or []
            if isinstance(user, dict)
        }
        tweets = [
            post for post in (SocialPost.from_tweet(t, users) for t in payload.get("data") or [])
            if post is not None
        ]
        logger.debug(f"[twitter] '{query[:60]}' -> {len(tweets)} tweets")
        return _done(self.name, tweets)
