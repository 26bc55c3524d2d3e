"""
Scorer Module - Strict keyword relevance scoring.

Components:
- EventScorer: scores and ranks candidate events against classified keywords
- CandidateEvent: immutable pool event
- ScoredEvent: event with score, match count and matched keywords
"""

from .models import CandidateEvent, ScoredEvent
from .scorer import EventScorer, rank_key


__all__ = [
    "EventScorer",
    "CandidateEvent",
    "ScoredEvent",
    "rank_key",
]
