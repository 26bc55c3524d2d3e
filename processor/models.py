"""
Trend Models - Dashboard presentation objects.

All to_dict() methods emit camelCase keys, the shape the dashboard reads.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TrendSource:
    """Where a trend came from."""
    name: str
    url: str
    type: str = "news"

    def to_dict(self) -> dict:
        return {"name": self.name, "url": self.url, "type": self.type}


@dataclass
class TimelineEntry:
    date: str
    label: str

    def to_dict(self) -> dict:
        return {"date": self.date, "label": self.label}


@dataclass
class SimilarEvent:
    """A prediction-market event related to a trend."""
    title: str
    url: str
    description: Optional[str] = None
    liquidity: Optional[float] = None
    volume: Optional[float] = None

    @classmethod
    def from_candidate(cls, event) -> "SimilarEvent":
        return cls(
            title=event.title,
            url=event.url or "",
            description=event.description,
            liquidity=event.liquidity,
            volume=event.volume,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "liquidity": self.liquidity,
            "volume": self.volume,
        }


@dataclass
class Trend:
    """A trend card shown on the dashboard."""
    id: str
    title: str
    category: str
    probability: int
    summary: str
    sources: list[TrendSource] = field(default_factory=list)
    timeline: list[TimelineEntry] = field(default_factory=list)
    similar_events: list[SimilarEvent] = field(default_factory=list)

    # news | prediction | social | market
    origin: str = "news"
    engagement: Optional[dict] = None
    market_url: Optional[str] = None

    # Marketability (set when the trend could back a market)
    is_marketable: bool = False
    event_type: Optional[str] = None
    deadline: Optional[str] = None
    question: Optional[str] = None
    marketability_score: Optional[int] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "probability": self.probability,
            "summary": self.summary,
            "sources": [s.to_dict() for s in self.sources],
            "timeline": [t.to_dict() for t in self.timeline],
            "similarEvents": [e.to_dict() for e in self.similar_events],
            "isMarketable": self.is_marketable,
            "origin": self.origin,
        }
        if self.engagement is not None:
            data["engagement"] = self.engagement
        if self.market_url:
            data["polymarketUrl"] = self.market_url
        if self.is_marketable:
            data.update({
                "eventType": self.event_type,
                "deadline": self.deadline,
                "question": self.question,
                "marketabilityScore": self.marketability_score,
            })
        return data
