"""
Trend Builder - News articles to dashboard trends.

Category and probability are heuristics over the article itself:
- category: which news category keywords the article mentions
- probability: recency, source credibility and article depth
Marketable articles also carry the question / deadline / event type.
"""
from datetime import datetime, timezone
from typing import Iterable, Optional

from constants import CREDIBLE_SOURCES, NEWS_CATEGORY_KEYWORDS
from .marketability import assess_article
from .matching import word_pattern
from .models import TimelineEntry, Trend, TrendSource


GENERAL_CATEGORY = "General"
CATEGORY_SEPARATOR = " • "
MAX_COMBINED_CATEGORIES = 2

BASE_PROBABILITY = 50
RECENCY_BONUSES = ((24, 15), (48, 10), (72, 5))   # (max hours old, bonus)
CREDIBLE_SOURCE_BONUS = 10
LONG_CONTENT_CHARS = 500
LONG_CONTENT_BONUS = 5
MIN_PROBABILITY = 20
MAX_PROBABILITY = 95

_CATEGORY_PATTERNS = {
    category: [word_pattern(keyword) for keyword in keywords]
    for category, keywords in NEWS_CATEGORY_KEYWORDS.items()
}


def _article_text(article) -> str:
    return f"{article.title or ''} {article.description or ''} {article.content or ''}"


def extract_category(text: str) -> str:
    """
    Category label for free text.

    One matching category -> its name; several -> the first two joined
    with " • "; none -> "General".
    """
    matched = [
        category.value
        for category, patterns in _CATEGORY_PATTERNS.items()
        if any(p.search(text or "") for p in patterns)
    ]
    if not matched:
        return GENERAL_CATEGORY
    return CATEGORY_SEPARATOR.join(matched[:MAX_COMBINED_CATEGORIES])


def calculate_probability(article, now: Optional[datetime] = None) -> int:
    """Heuristic 20-95 likelihood that a news story develops into a trend."""
    now = now or datetime.now(timezone.utc)
    probability = BASE_PROBABILITY

    if article.published_at is not None:
        hours_old = (now - article.published_at).total_seconds() / 3600
        for max_hours, bonus in RECENCY_BONUSES:
            if hours_old < max_hours:
                probability += bonus
                break

    source = article.source or ""
    if any(name in source for name in CREDIBLE_SOURCES):
        probability += CREDIBLE_SOURCE_BONUS

    if len(article.content or article.description or "") > LONG_CONTENT_CHARS:
        probability += LONG_CONTENT_BONUS

    return min(MAX_PROBABILITY, max(MIN_PROBABILITY, probability))


def article_to_trend(article, index: int, now: Optional[datetime] = None) -> Trend:
    """Build a Trend card from a news article."""
    now = now or datetime.now(timezone.utc)
    published = article.published_iso or now.isoformat()

    trend = Trend(
        id=f"news-{index}-{int(now.timestamp() * 1000)}",
        title=article.title,
        category=extract_category(_article_text(article)),
        probability=calculate_probability(article, now),
        summary=article.description or article.title,
        sources=[TrendSource(name=article.source, url=article.url, type="news")],
        timeline=[TimelineEntry(date=published, label="News published")],
    )

    assessment = assess_article(article.title, article.description, article.content or "")
    if assessment is not None:
        trend.is_marketable = True
        trend.event_type = assessment.event_type
        trend.deadline = assessment.deadline
        trend.question = assessment.question
        trend.marketability_score = assessment.score
    return trend


def rank_marketable(entries: Iterable[dict]) -> list[dict]:
    """Sort marketable entries by marketabilityScore, highest first (stable)."""
    return sorted(entries, key=lambda entry: entry.get("marketabilityScore", 0), reverse=True)


def matches_interests(category_label: str, interests: Iterable[str]) -> bool:
    """
    True when a (possibly combined) category label covers any interest.

    "AI • Policy" matches both "AI" and "policy".
    """
    label = (category_label or "").lower()
    parts = {p.strip() for p in label.split(CATEGORY_SEPARATOR.strip())}
    for interest in interests:
        interest = interest.strip().lower()
        if not interest:
            continue
        if interest in parts or interest == label or (label and label in interest):
            return True
    return False
