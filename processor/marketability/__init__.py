"""
Marketability Module - Spot events that could become prediction markets.

Components:
- is_marketable: gate for social posts
- classify_event_type: question / deadline / type details
- marketability_score: 0-100 score from indicator counts
- assess_article: full assessment of a news article
"""

from .models import EventDetails, MarketabilityAssessment
from .marketability import (
    is_marketable,
    classify_event_type,
    extract_deadline,
    extract_question,
    marketability_score,
    article_indicators,
    assess_article,
)


__all__ = [
    "is_marketable",
    "classify_event_type",
    "extract_deadline",
    "extract_question",
    "marketability_score",
    "article_indicators",
    "assess_article",
    "EventDetails",
    "MarketabilityAssessment",
]
