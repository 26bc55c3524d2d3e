"""
Base Crawler - Abstract base class for all crawlers
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
import hashlib

import httpx
from loguru import logger

from config import settings


class CrawlerError(Exception):
    """A source could not be fetched or returned an unusable payload."""
    pass


@dataclass
class CrawlResult:
    """Base result from a crawler."""
    source: str
    crawled_at: datetime
    success: bool
    data: list = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "crawled_at": self.crawled_at.isoformat(),
            "success": self.success,
            "data": [item.to_dict() if hasattr(item, "to_dict") else item for item in self.data],
            "error": self.error,
            "count": len(self.data)
        }


def parse_timestamp(value: Any) -> Optional[datetime]:
    """ISO-8601 string (with or without trailing Z) to aware datetime."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class NewsArticle:
    """Standard news article structure."""
    title: str
    description: str
    url: str
    source: str
    published_at: Optional[datetime] = None
    content: Optional[str] = None

    @classmethod
    def from_newsapi(cls, record: dict) -> "NewsArticle":
        """Build from a NewsAPI /everything article."""
        source = record.get("source") or {}
        if isinstance(source, dict):
            source = source.get("name") or ""
        return cls(
            title=record.get("title") or "",
            description=record.get("description") or "",
            url=record.get("url") or "",
            source=str(source),
            published_at=parse_timestamp(record.get("publishedAt")),
            content=record.get("content"),
        )

    @property
    def published_iso(self) -> Optional[str]:
        return self.published_at.isoformat() if self.published_at else None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "source": self.source,
            "publishedAt": self.published_iso,
            "content": self.content,
        }

    def compute_hash(self) -> str:
        """Compute hash for deduplication."""
        content = f"{self.title}|{self.source}|{self.published_at}"
        return hashlib.md5(content.encode()).hexdigest()


class BaseCrawler(ABC):
    """Abstract base class for all data crawlers."""

    def __init__(
        self,
        name: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.name = name
        self.timeout = timeout if timeout is not None else settings.CRAWLER_TIMEOUT
        self.transport = transport
        self.headers = {
            "Accept": "application/json",
            "User-Agent": "TrendRadar/1.0",
        }

    def client(self) -> httpx.AsyncClient:
        """HTTP client for one fetch."""
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
            verify=settings.CRAWLERS_ENABLE_SSL,
            follow_redirects=True,
        )

    async def get_json(self, url: str, params: Optional[dict] = None) -> Any:
        """
        GET a JSON document.

        Raises:
            CrawlerError: transport failure, non-2xx status or invalid JSON
        """
        try:
            async with self.client() as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise CrawlerError(f"{self.name} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CrawlerError(f"{self.name} request failed: {e}") from e
        except ValueError as e:
            raise CrawlerError(f"{self.name} returned invalid JSON") from e

    @abstractmethod
    async def fetch(self, **kwargs) -> CrawlResult:
        """
        Fetch data from the source.
        Must be implemented by subclasses.
        """
        pass

    def failed(self, error: str) -> CrawlResult:
        return CrawlResult(
            source=self.name,
            crawled_at=datetime.now(timezone.utc),
            success=False,
            data=[],
            error=error
        )

    async def run(self, **kwargs) -> CrawlResult:
        """Run the crawler with error handling."""
        logger.info(f"[{self.name}] Starting crawl...")

        try:
            result = await self.fetch(**kwargs)

            if result.success:
                logger.info(f"[{self.name}] Successfully crawled {len(result.data)} items")
            else:
                logger.error(f"[{self.name}] Crawl failed: {result.error}")

            return result

        except CrawlerError as e:
            logger.error(f"[{self.name}] {e}")
            return self.failed(str(e))

        except Exception as e:
            logger.exception(f"[{self.name}] Unexpected error during crawl")
            return self.failed(str(e))
