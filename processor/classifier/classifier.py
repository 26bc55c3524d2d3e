"""
Keyword Classifier - Separate trend-specific keywords from category keywords.

Category tags such as "gaming" say nothing about which event matches a given
trend, so any keyword overlapping the category's tag list is weighted far
below words unique to the trend's own title and summary.
"""
from typing import Iterable, Optional

from loguru import logger

from constants import Category, normalize_category
from ..config import MatchingConfig, get_matching_config
from ..matching import word_pattern
from .models import ClassifiedKeywords, DetectedType


def classify_keywords(
    keywords: Iterable[str],
    category=None,
    config: Optional[MatchingConfig] = None,
) -> ClassifiedKeywords:
    """
    Partition keywords by overlap with the category's tag list.

    A keyword is a category keyword when it contains a tag or a tag contains
    it; everything else is trend-specific. Every input keyword lands in
    exactly one side. Unknown categories have no tags, so all keywords are
    trend-specific.
    """
    config = config or get_matching_config()
    category = normalize_category(category)
    tags = config.tags_for(category)

    trend_keywords: list[str] = []
    category_keywords: list[str] = []

    for keyword in keywords:
        keyword = (keyword or "").lower().strip()
        if not keyword:
            continue
        if any(tag in keyword or keyword in tag for tag in tags):
            category_keywords.append(keyword)
        else:
            trend_keywords.append(keyword)

    return ClassifiedKeywords(trend_keywords=trend_keywords, category_keywords=category_keywords)


def _mentions_any(text: str, terms: Iterable[str]) -> bool:
    return any(word_pattern(term).search(text) for term in terms)


def detect_category_type(
    keywords: Iterable[str],
    category=None,
    config: Optional[MatchingConfig] = None,
) -> Optional[DetectedType]:
    """
    Infer the sport or category a keyword list is about.

    Order of checks:
    1. Sports (Gaming only) - the first sport whose terms appear
    2. Category detection terms - the requested category first, then the rest
    3. The requested category itself

    Terms are matched on word boundaries against the joined keywords.
    """
    config = config or get_matching_config()
    category = normalize_category(category)
    joined = " ".join(k.lower() for k in keywords if k)

    if joined and category is Category.GAMING:
        for sport, terms in config.sport_terms.items():
            if _mentions_any(joined, terms):
                return DetectedType(kind="sport", value=sport)

    if joined:
        own_key = category.value.lower() if category else None
        ordered = list(config.category_detection_terms.items())
        if own_key in config.category_detection_terms:
            ordered.sort(key=lambda item: item[0] != own_key)
        for key, terms in ordered:
            if _mentions_any(joined, terms):
                return DetectedType(kind="category", value=key)

    if category is not None:
        return DetectedType(kind="category", value=category.value.lower())

    logger.debug("No sport or category detected from keywords")
    return None
