"""
API Routes - All endpoint definitions for Trend Radar

Endpoints organized by:
- Health Check
- Polymarket (events similar to a trend)
- Trends (marketable news events)
- News (news articles as trends)
- Predictions (interest feed from markets, social posts and news)
"""
import asyncio
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool

from config import settings
from constants import MARKETABLE_QUERY_KEYWORDS, NEWS_CATEGORY_KEYWORDS, normalize_category
from crawlers import NewsCrawler, PolymarketCrawler, RedditCrawler, TwitterCrawler
from processor import (
    SimilarEventsPipeline,
    article_to_trend,
    assess_article,
    build_search_keywords,
    deduplicate_trends,
    finalize_predictions,
    news_predictions,
    pool_trends,
    rank_marketable,
    social_trends,
)
from processor import predictions
from processor.matching import dedupe
from processor.pipeline import default_reranker
from processor.trends import matches_interests

router = APIRouter()

MARKETABLE_QUERY_TERMS = 3
MARKETABLE_PAGE_SIZE = 20
MAX_MARKETABLE_EVENTS = 20
NEWS_QUERY_TERMS = 10
NEWS_PAGE_SIZE = 20
SOCIAL_FETCH_LIMIT = 30


# ============================================================
# Dependencies
# ============================================================
@lru_cache(maxsize=1)
def get_polymarket_crawler() -> PolymarketCrawler:
    return PolymarketCrawler()


@lru_cache(maxsize=1)
def get_news_crawler() -> NewsCrawler:
    return NewsCrawler()


@lru_cache(maxsize=1)
def get_pipeline() -> SimilarEventsPipeline:
    return SimilarEventsPipeline(reranker=default_reranker())


@lru_cache(maxsize=1)
def get_reddit_crawler() -> RedditCrawler:
    return RedditCrawler()


@lru_cache(maxsize=1)
def get_twitter_crawler() -> TwitterCrawler:
    return TwitterCrawler()


def _split_interests(interests: Optional[str]) -> list[str]:
    if not interests:
        return []
    return dedupe(i.strip() for i in interests.split(",") if i.strip())


def _interest_terms(interest: str, table: dict) -> list[str]:
    category = normalize_category(interest)
    return list(table.get(category) or [interest])


# ============================================================
# Health Check
# ============================================================
@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "rerank_enabled": settings.LLM_RERANK_ENABLED,
        "news_configured": bool(settings.NEWS_API_KEY),
    }


# ============================================================
# Polymarket
# ============================================================
@router.get("/polymarket/events")
async def similar_polymarket_events(
    category: Optional[str] = None,
    title: Optional[str] = None,
    summary: Optional[str] = None,
    limit: int = Query(default=settings.DEFAULT_EVENT_LIMIT, ge=1, le=50),
    crawler: PolymarketCrawler = Depends(get_polymarket_crawler),
    pipeline: SimilarEventsPipeline = Depends(get_pipeline),
):
    """
    Prediction-market events related to a trend.

    Keywords come from the title, the summary and the category tags.
    """
    try:
        keywords = build_search_keywords(title, summary, category, pipeline.config)
        if not keywords:
            return {"events": [], "message": "No keywords provided"}

        pool = await crawler.get_pool()
        events = await run_in_threadpool(
            pipeline.find_similar_events,
            title,
            summary,
            category,
            pool,
            limit,
            keywords,
        )
        return {
            "events": [e.to_dict() for e in events],
            "total": len(events),
        }

    except Exception as e:
        logger.exception("Error matching Polymarket events")
        return JSONResponse(status_code=500, content={"events": [], "error": str(e)})


# ============================================================
# Trends
# ============================================================
async def _marketable_for_interest(news: NewsCrawler, interest: str) -> list[dict]:
    query = " OR ".join(_interest_terms(interest, MARKETABLE_QUERY_KEYWORDS)[:MARKETABLE_QUERY_TERMS])
    result = await news.run(query=query, page_size=MARKETABLE_PAGE_SIZE)
    if not result.success:
        return []

    stamp = int(datetime.now(timezone.utc).timestamp() * 1000)
    entries = []
    for article in result.data:
        assessment = assess_article(article.title, article.description, article.content or "")
        if assessment is None:
            continue
        slug = article.url.rstrip("/").split("/")[-1] if article.url else "article"
        entries.append({
            "id": f"marketable-{slug}-{stamp}",
            "title": article.title,
            "description": article.description,
            "url": article.url,
            "source": article.source,
            "publishedAt": article.published_iso,
            "category": interest,
            **assessment.to_dict(),
        })
    return entries


@router.get("/trends/marketable")
async def marketable_trends(
    interests: Optional[str] = Query(default=None, description="Comma-separated categories"),
    news: NewsCrawler = Depends(get_news_crawler),
):
    """News stories that could become prediction markets, best first."""
    if not news.is_configured:
        return {"events": [], "message": "NewsAPI key not configured"}

    try:
        batches = await asyncio.gather(*(
            _marketable_for_interest(news, interest)
            for interest in _split_interests(interests)
        ))
        events = rank_marketable(entry for batch in batches for entry in batch)

        return {
            "events": events[:MAX_MARKETABLE_EVENTS],
            "total": len(events),
            "message": f"Found {len(events)} potential Polymarket events",
        }

    except Exception as e:
        logger.exception("Error fetching marketable events")
        return JSONResponse(status_code=500, content={"events": [], "error": str(e)})


# ============================================================
# News
# ============================================================
@router.get("/news")
async def news_trends(
    interests: Optional[str] = Query(default=None, description="Comma-separated categories"),
    q: str = Query(default="technology", description="Query used when no interests are given"),
    limit: int = Query(default=15, ge=1, le=50),
    news: NewsCrawler = Depends(get_news_crawler),
):
    """
    Recent news articles converted to trend cards.

    Articles are filtered to the requested interests (all articles are
    returned when none match) and near-duplicate titles are dropped.
    """
    if not news.is_configured:
        return {"trends": [], "message": "NewsAPI key not configured"}

    selected = _split_interests(interests)
    query = q
    if selected:
        terms = dedupe(
            term for interest in selected
            for term in _interest_terms(interest, NEWS_CATEGORY_KEYWORDS)
        )[:NEWS_QUERY_TERMS]
        if terms:
            query = " OR ".join(terms)
            logger.info(f"News query for interests [{', '.join(selected)}]: {query}")

    try:
        result = await news.run(query=query, page_size=NEWS_PAGE_SIZE)
        if not result.success:
            return JSONResponse(status_code=500, content={"trends": [], "error": result.error})

        now = datetime.now(timezone.utc)
        articles = [a for a in result.data if a.title and a.description][:limit]
        trends = [article_to_trend(article, index, now) for index, article in enumerate(articles)]

        filtered = trends
        if selected:
            filtered = [t for t in trends if matches_interests(t.category, selected)]
            if not filtered and trends:
                logger.info(f"No trends matched interests {selected}, returning all")
                filtered = trends

        unique = deduplicate_trends(filtered)
        return {
            "trends": [t.to_dict() for t in unique],
            "total": len(unique),
            "filtered": bool(selected) and len(unique) < len(trends),
        }

    except Exception as e:
        logger.exception("Error fetching news")
        return JSONResponse(status_code=500, content={"trends": [], "error": str(e)})


# ============================================================
# Predictions
# ============================================================
async def _no_posts() -> list:
    return []


async def _posts(crawler, **kwargs) -> list:
    result = await crawler.run(**kwargs)
    return result.data if result.success else []


async def _predictions_for_interest(
    interest: str,
    polymarket: PolymarketCrawler,
    news: NewsCrawler,
    reddit: RedditCrawler,
    twitter: TwitterCrawler,
) -> list:
    category = normalize_category(interest)
    if category is None:
        logger.warning(f"Skipping unknown interest '{interest}'")
        return []

    tweets = (
        _posts(twitter, query=predictions.twitter_query(category), limit=SOCIAL_FETCH_LIMIT)
        if twitter.is_configured else _no_posts()
    )
    pool, posts, tweets, articles = await asyncio.gather(
        polymarket.get_pool(),
        _posts(
            reddit,
            query=predictions.reddit_query(category),
            subreddits=predictions.subreddits_for(category),
            limit=SOCIAL_FETCH_LIMIT,
        ),
        tweets,
        news.run(query=predictions.news_query(category), page_size=predictions.news_page_size(category)),
    )

    now = datetime.now(timezone.utc)
    markets = pool_trends(pool, category, now=now)
    social = social_trends(posts, category, now=now) + social_trends(tweets, category, now=now)
    outlook = []
    if articles.success:
        outlook = news_predictions(articles.data, category, has_social=bool(social), now=now)

    logger.info(
        f"Predictions for {category.value}: {len(markets)} markets, "
        f"{len(social)} social, {len(outlook)} from news"
    )
    return markets + social + outlook


@router.get("/trends/predict")
async def predicted_trends(
    interests: Optional[str] = Query(default=None, description="Comma-separated categories"),
    polymarket: PolymarketCrawler = Depends(get_polymarket_crawler),
    news: NewsCrawler = Depends(get_news_crawler),
    reddit: RedditCrawler = Depends(get_reddit_crawler),
    twitter: TwitterCrawler = Depends(get_twitter_crawler),
):
    """
    Forward-looking trends for the selected interests.

    Open markets, marketable social posts and grouped news outlooks are
    ranked together, de-duplicated and capped at 20.
    """
    selected = _split_interests(interests)
    if not selected:
        return {"trends": [], "message": "Please select interests to generate predictions"}
    if not news.is_configured:
        return {"trends": [], "message": "NewsAPI key not configured"}

    try:
        batches = await asyncio.gather(*(
            _predictions_for_interest(interest, polymarket, news, reddit, twitter)
            for interest in selected
        ))
        trends, total = finalize_predictions(trend for batch in batches for trend in batch)

        return {
            "trends": [t.to_dict() for t in trends],
            "total": total,
            "interests": selected,
        }

    except Exception as e:
        logger.exception("Error generating predictions")
        return JSONResponse(status_code=500, content={"trends": [], "error": str(e)})
