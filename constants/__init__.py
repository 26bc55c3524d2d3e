"""
Constants package for Trend Radar.

Contains the category enum and the vocabulary tables that drive keyword
matching. Everything here is plain data; processor.config freezes it.
"""

from .categories import (
    Category,
    normalize_category,
    CATEGORY_TAGS,
    CATEGORY_EXCLUSIONS,
    SPORTS_KEYWORDS,
    ESPORTS_KEYWORDS,
    SPORT_TERMS,
    CATEGORY_DETECTION_TERMS,
    CATEGORY_SEARCH_TERMS,
    NEWS_CATEGORY_KEYWORDS,
    MARKETABLE_QUERY_KEYWORDS,
    CREDIBLE_SOURCES,
    GAMING_TRADING_EXCLUSION,
    GAMING_TRADING_REQUIRES,
)
from .vocabulary import (
    STOP_WORDS,
    KNOWN_ENTITIES,
    SPORTS_SYNONYMS,
    GAMING_SYNONYMS,
    GENERAL_SYNONYMS,
)
from .predictions import (
    PREDICTION_KEYWORDS,
    PREDICTION_TIMEFRAMES,
    TIMEFRAME_DAYS,
    DEFAULT_TIMEFRAME_DAYS,
    POOL_TREND_KEYWORDS,
    SUBREDDITS,
    TWITTER_MARKETABLE_TERMS,
    MARKETABLE_NEWS_TERMS,
    UNRELATED_NEWS_TERMS,
    UNRELATED_TERMS_ALLOWED,
    BROAD_NEWS_INTERESTS,
)


__all__ = [
    # Categories
    "Category",
    "normalize_category",
    "CATEGORY_TAGS",
    "CATEGORY_EXCLUSIONS",
    "SPORTS_KEYWORDS",
    "ESPORTS_KEYWORDS",
    "SPORT_TERMS",
    "CATEGORY_DETECTION_TERMS",
    "CATEGORY_SEARCH_TERMS",
    "NEWS_CATEGORY_KEYWORDS",
    "MARKETABLE_QUERY_KEYWORDS",
    "CREDIBLE_SOURCES",
    "GAMING_TRADING_EXCLUSION",
    "GAMING_TRADING_REQUIRES",
    # Vocabulary
    "STOP_WORDS",
    "KNOWN_ENTITIES",
    "SPORTS_SYNONYMS",
    "GAMING_SYNONYMS",
    "GENERAL_SYNONYMS",
    # Predictions
    "PREDICTION_KEYWORDS",
    "PREDICTION_TIMEFRAMES",
    "TIMEFRAME_DAYS",
    "DEFAULT_TIMEFRAME_DAYS",
    "POOL_TREND_KEYWORDS",
    "SUBREDDITS",
    "TWITTER_MARKETABLE_TERMS",
    "MARKETABLE_NEWS_TERMS",
    "UNRELATED_NEWS_TERMS",
    "UNRELATED_TERMS_ALLOWED",
    "BROAD_NEWS_INTERESTS",
]
