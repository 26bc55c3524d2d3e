"""
Keywords Module - Extraction and synonym expansion.

Components:
- extract_keywords: free text -> ranked keyword list
- expand_keywords: keyword list -> synonym-expanded superset
"""

from .extractor import (
    extract_keywords,
    extract_entities,
    extract_proper_nouns,
    MAX_KEYWORDS,
)
from .expander import expand_keywords


__all__ = [
    "extract_keywords",
    "extract_entities",
    "extract_proper_nouns",
    "expand_keywords",
    "MAX_KEYWORDS",
]
