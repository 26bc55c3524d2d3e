"""
Polymarket Crawler - Open events from the Gamma API

Source: https://gamma-api.polymarket.com/events
The newest open events (up to POLYMARKET_POOL_SIZE) form the candidate pool
that trends are matched against.
"""
import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from loguru import logger

from config import settings
from processor.scorer import CandidateEvent
from .base_crawler import BaseCrawler, CrawlResult


# Keys the Gamma API (and its proxies) have used to wrap the event list
_LIST_KEYS = ("data", "results", "events")


def extract_event_list(payload: Any) -> list:
    """
    Pull the raw event list out of a Gamma response.

    Accepts a bare list or an object wrapping it under data / results /
    events. Anything else yields [].
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in _LIST_KEYS:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def parse_events(records: list) -> list[CandidateEvent]:
    """Convert raw records to CandidateEvent, skipping malformed ones."""
    events = []
    skipped = 0
    for record in records:
        try:
            events.append(CandidateEvent.from_dict(record))
        except ValueError:
            skipped += 1
    if skipped:
        logger.debug(f"[polymarket] Skipped {skipped} malformed event records")
    return events


class PolymarketCrawler(BaseCrawler):
    """
    Crawler for the Polymarket candidate pool.

    The pool is cached in-process for cache_seconds; concurrent callers
    share a single refresh.
    """

    def __init__(
        self,
        api_base: Optional[str] = None,
        pool_size: Optional[int] = None,
        cache_seconds: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("polymarket", timeout=timeout, transport=transport)
        self.api_base = (api_base or settings.POLYMARKET_API_BASE).rstrip("/")
        self.pool_size = pool_size or settings.POLYMARKET_POOL_SIZE
        self.cache_seconds = settings.POLYMARKET_CACHE_SECONDS if cache_seconds is None else cache_seconds

        self._pool: list[CandidateEvent] = []
        self._fetched_at: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def events_url(self) -> str:
        return f"{self.api_base}/events"

    def _params(self) -> dict:
        return {
            "closed": "false",
            "limit": self.pool_size,
            "order": "id",
            "ascending": "false",
        }

    async def fetch(self, **kwargs) -> CrawlResult:
        """Fetch open events, newest first."""
        payload = await self.get_json(self.events_url, params=self._params())
        records = extract_event_list(payload)
        if not records:
            logger.warning("[polymarket] API returned no events")
        events = parse_events(records)

        return CrawlResult(
            source=self.name,
            crawled_at=datetime.now(timezone.utc),
            success=True,
            data=events,
        )

    def _is_fresh(self) -> bool:
        if self._fetched_at is None:
            return False
        return time.monotonic() - self._fetched_at < self.cache_seconds

    async def get_pool(self) -> list[CandidateEvent]:
        """
        Candidate pool, served from cache while fresh.

        A failed refresh keeps serving the previous pool (or [] if there
        is none).
        """
        if self._is_fresh():
            return list(self._pool)

        async with self._lock:
            if self._is_fresh():
                return list(self._pool)

            result = await self.run()
            if result.success:
                self._pool = list(result.data)
                self._fetched_at = time.monotonic()
            elif self._pool:
                logger.warning(f"[polymarket] Serving stale pool of {len(self._pool)} events")

            return list(self._pool)

    def clear_cache(self):
        self._pool = []
        self._fetched_at = None
