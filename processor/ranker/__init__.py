"""
Ranker Module - Optional LLM re-ranking of matched events.

Components:
- EventReranker: semantic re-rank, None on any failure
- RerankError: unusable LLM answer
- parse_ranking: index array parsing
"""

from .ranker import EventReranker, RerankError, parse_ranking, format_events_list


__all__ = [
    "EventReranker",
    "RerankError",
    "parse_ranking",
    "format_events_list",
]
