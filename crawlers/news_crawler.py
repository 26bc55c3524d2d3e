"""
News Crawler - NewsAPI /v2/everything

Fetches the newest English articles for a query. Requires NEWS_API_KEY;
without it every fetch fails (and callers fall back to empty results).
"""
from datetime import datetime, timezone
from typing import Optional

import httpx
from loguru import logger

from config import settings
from .base_crawler import BaseCrawler, CrawlResult, CrawlerError, NewsArticle


DEFAULT_PAGE_SIZE = 20


class NewsCrawler(BaseCrawler):
    """Crawler for news articles from NewsAPI."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("news", timeout=timeout, transport=transport)
        self.api_key = settings.NEWS_API_KEY if api_key is None else api_key
        self.api_base = (api_base or settings.NEWS_API_BASE).rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def fetch(self, query: str = "technology", page_size: int = DEFAULT_PAGE_SIZE, **kwargs) -> CrawlResult:
        """
        Fetch articles matching query.

        Args:
            query: NewsAPI search expression (supports OR)
            page_size: Max articles returned
        """
        if not self.is_configured:
            return self.failed("NewsAPI key not configured")

        params = {
            "q": query,
            "sortBy": "publishedAt",
            "pageSize": page_size,
            "language": "en",
            "apiKey": self.api_key,
        }
        data = await self.get_json(f"{self.api_base}/everything", params=params)

        if not isinstance(data, dict) or data.get("status") != "ok":
            message = data.get("message") if isinstance(data, dict) else None
            raise CrawlerError(f"NewsAPI returned error status: {message or 'unknown'}")

        articles = []
        for record in data.get("articles") or []:
            if not isinstance(record, dict):
                continue
            article = NewsArticle.from_newsapi(record)
            if article.title:
                articles.append(article)

        logger.debug(f"[news] '{query[:60]}' -> {len(articles)} articles")
        return CrawlResult(
            source=self.name,
            crawled_at=datetime.now(timezone.utc),
            success=True,
            data=articles,
        )
