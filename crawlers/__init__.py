"""Crawlers package for Trend Radar."""

from .base_crawler import BaseCrawler, CrawlResult, CrawlerError, NewsArticle
from .polymarket_crawler import PolymarketCrawler, extract_event_list, parse_events
from .news_crawler import NewsCrawler
from .social_crawler import SocialPost, RedditCrawler, TwitterCrawler

__all__ = [
    "BaseCrawler",
    "CrawlResult",
    "CrawlerError",
    "NewsArticle",
    "SocialPost",
    "PolymarketCrawler",
    "NewsCrawler",
    "RedditCrawler",
    "TwitterCrawler",
    "extract_event_list",
    "parse_events",
]
