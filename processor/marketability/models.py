"""
Data models for the Marketability module.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class EventDetails:
    """Question, deadline and type pulled out of a marketable text."""
    question: Optional[str]
    deadline: Optional[str]
    event_type: str

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "deadline": self.deadline,
            "eventType": self.event_type,
        }


@dataclass
class MarketabilityAssessment:
    """How likely a news article is to back a prediction market."""
    event_type: str
    deadline: Optional[str]
    question: Optional[str]
    score: int
    indicators: dict = field(default_factory=dict)

    @property
    def indicator_count(self) -> int:
        return sum(1 for hit in self.indicators.values() if hit)

    def to_dict(self) -> dict:
        return {
            "eventType": self.event_type,
            "deadline": self.deadline,
            "question": self.question,
            "marketabilityScore": self.score,
            "indicators": {
                f"has{name.capitalize()}": hit for name, hit in self.indicators.items()
            },
        }
