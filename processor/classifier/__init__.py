"""
Classifier Module - Keyword partitioning and type detection.

Components:
- classify_keywords: split keywords into trend-specific vs category keywords
- detect_category_type: infer a sport / category from keywords
- ClassifiedKeywords, DetectedType: result data classes
"""

from .models import ClassifiedKeywords, DetectedType
from .classifier import classify_keywords, detect_category_type


__all__ = [
    "classify_keywords",
    "detect_category_type",
    "ClassifiedKeywords",
    "DetectedType",
]
