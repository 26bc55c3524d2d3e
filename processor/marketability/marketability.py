"""
Marketability - Decide whether text describes a prediction-market event.

Two consumers:
- social posts: is_marketable() gate + classify_event_type() details
- news articles: assess_article() indicator count and score
"""
import re
from typing import Optional

from loguru import logger

from . import config as patterns
from .models import EventDetails, MarketabilityAssessment


def _compile_indicator(keywords: list[str]) -> re.Pattern:
    alternatives = []
    for keyword in keywords:
        escaped = re.escape(keyword)
        if keyword in patterns.WHOLE_WORD_INDICATORS:
            escaped += r"\b"
        alternatives.append(escaped)
    return re.compile(r"\b(?:" + "|".join(alternatives) + ")", re.IGNORECASE)


_INDICATOR_PATTERNS = {
    name: _compile_indicator(keywords)
    for name, keywords in patterns.ARTICLE_INDICATORS.items()
}


# ============================================
# SOCIAL POSTS
# ============================================

def is_marketable(text: str) -> bool:
    """
    True when text reads like a concrete, time-bound decision.

    Gates, in order:
    1. Exclusion patterns reject (unless a major-event keyword is present)
    2. An event-indicator pattern must match
    3. Time bound + decision keyword, or a regulatory entity
    """
    if not text or not text.strip():
        return False

    if any(p.search(text) for p in patterns.EXCLUSION_PATTERNS):
        if not patterns.MAJOR_EVENT_PATTERN.search(text):
            return False

    if not any(p.search(text) for p in patterns.EVENT_INDICATOR_PATTERNS):
        return False

    has_time_bound = patterns.TIME_BOUND_PATTERN.search(text) is not None
    has_decision = patterns.DECISION_PATTERN.search(text) is not None
    is_regulatory = patterns.REGULATORY_PATTERN.search(text) is not None

    return (has_time_bound and has_decision) or is_regulatory


def extract_deadline(text: str) -> Optional[str]:
    """Date-like phrase after by/on/before/until, original casing kept."""
    match = patterns.DEADLINE_PATTERN.search(text or "")
    return match.group(1) if match else None


def classify_event_type(text: str, title: str) -> EventDetails:
    """Question (from the title), deadline and event type of a post."""
    text = text or ""
    title = title or ""
    full_text = f"{title} {text}"

    question = None
    match = patterns.QUESTION_PATTERN.search(title)
    if match and match.group(1).strip():
        question = f"Will {match.group(1).strip()}?"

    event_type = patterns.GENERAL_EVENT
    for name, pattern in patterns.EVENT_TYPE_PATTERNS:
        if pattern.search(full_text):
            event_type = name
            break

    return EventDetails(
        question=question,
        deadline=extract_deadline(full_text),
        event_type=event_type,
    )


def marketability_score(indicator_count: int, has_deadline: bool, has_date: bool) -> int:
    """10 per indicator, +20 deadline, +15 date, capped at 100."""
    score = indicator_count * patterns.INDICATOR_POINTS
    if has_deadline:
        score += patterns.DEADLINE_BONUS
    if has_date:
        score += patterns.DATE_BONUS
    return min(patterns.MAX_SCORE, score)


# ============================================
# NEWS ARTICLES
# ============================================

def article_indicators(text: str) -> dict:
    """The eight indicator flags for an article's text."""
    indicators = {
        name: pattern.search(text) is not None
        for name, pattern in _INDICATOR_PATTERNS.items()
    }
    if patterns.YEAR_PATTERN.search(text):
        indicators["date"] = True
    return indicators


def extract_question(title: str, description: str = "") -> Optional[str]:
    """Outcome phrase that could become a market question."""
    text = f"{title or ''} {description or ''}".lower()
    for pattern in patterns.ARTICLE_QUESTION_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()

    title = title or ""
    if any(marker in title.lower() for marker in patterns.QUESTION_TITLE_MARKERS):
        return title[:patterns.MAX_QUESTION_LENGTH]
    return None


def assess_article(
    title: str,
    description: str = "",
    content: str = "",
) -> Optional[MarketabilityAssessment]:
    """
    Score a news article's marketability.

    Returns:
        MarketabilityAssessment, or None when fewer than two indicators fire
    """
    text = f"{title or ''} {description or ''} {content or ''}"
    indicators = article_indicators(text)
    count = sum(1 for hit in indicators.values() if hit)
    if count < patterns.MIN_ARTICLE_INDICATORS:
        return None

    event_type = patterns.ARTICLE_GENERAL_EVENT
    for name, label in patterns.ARTICLE_EVENT_TYPES:
        if indicators.get(name):
            event_type = label
            break

    assessment = MarketabilityAssessment(
        event_type=event_type,
        deadline=extract_deadline(text),
        question=extract_question(title, description),
        score=marketability_score(count, indicators["deadline"], indicators["date"]),
        indicators=indicators,
    )
    logger.debug(f"Marketable article ({assessment.score}): {title[:60] if title else ''}")
    return assessment
