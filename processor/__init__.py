"""
Processor package for Trend Radar.

Event-relevance matching:
- keywords: extract and expand keywords from trend text
- classifier: split trend-specific vs category keywords
- scorer: strict relevance scoring of candidate events
- orchestrator: strict -> lenient -> category fallbacks
- ranker: optional LLM re-rank
- marketability: does a text describe a market-worthy event
- predictions: interest-driven feed from markets, social posts and news

Main entry point: SimilarEventsPipeline
"""

from .config import MatchingConfig, build_matching_config, get_matching_config
from .keywords import extract_keywords, expand_keywords
from .classifier import ClassifiedKeywords, DetectedType, classify_keywords, detect_category_type
from .scorer import CandidateEvent, ScoredEvent, EventScorer
from .orchestrator import FallbackOrchestrator, Matched, NoMatch
from .ranker import EventReranker, RerankError
from .marketability import (
    EventDetails,
    MarketabilityAssessment,
    is_marketable,
    classify_event_type,
    marketability_score,
    assess_article,
)
from .dedup import title_similarity, is_duplicate_title, deduplicate_trends
from .models import Trend, TrendSource, TimelineEntry, SimilarEvent
from .trends import extract_category, calculate_probability, article_to_trend, rank_marketable
from .predictions import (
    social_post_to_trend,
    social_trends,
    market_event_to_trend,
    pool_trends,
    news_predictions,
    rank_predictions,
    finalize_predictions,
)
from .pipeline import SimilarEventsPipeline, build_search_keywords

__all__ = [
    # Pipeline
    "SimilarEventsPipeline",
    "build_search_keywords",
    # Config
    "MatchingConfig",
    "build_matching_config",
    "get_matching_config",
    # Keywords
    "extract_keywords",
    "expand_keywords",
    "ClassifiedKeywords",
    "DetectedType",
    "classify_keywords",
    "detect_category_type",
    # Matching
    "CandidateEvent",
    "ScoredEvent",
    "EventScorer",
    "FallbackOrchestrator",
    "Matched",
    "NoMatch",
    "EventReranker",
    "RerankError",
    # Marketability
    "EventDetails",
    "MarketabilityAssessment",
    "is_marketable",
    "classify_event_type",
    "marketability_score",
    "assess_article",
    # Trends
    "Trend",
    "TrendSource",
    "TimelineEntry",
    "SimilarEvent",
    "title_similarity",
    "is_duplicate_title",
    "deduplicate_trends",
    "extract_category",
    "calculate_probability",
    "article_to_trend",
    "rank_marketable",
    # Predictions
    "social_post_to_trend",
    "social_trends",
    "market_event_to_trend",
    "pool_trends",
    "news_predictions",
    "rank_predictions",
    "finalize_predictions",
]
