"""
Data models for the Scorer module.
"""
from dataclasses import dataclass, field
from typing import Any, Optional


def _to_float(value: Any) -> Optional[float]:
    """Numbers or numeric strings; anything else becomes None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _tag_names(raw_tags: Any) -> tuple:
    """Tags arrive as plain strings or as {"label"/"name"/"slug": ...} objects."""
    if not isinstance(raw_tags, (list, tuple)):
        return ()
    names = []
    for tag in raw_tags:
        if isinstance(tag, str):
            name = tag
        elif isinstance(tag, dict):
            name = tag.get("label") or tag.get("name") or tag.get("slug") or ""
        else:
            continue
        name = str(name).strip()
        if name:
            names.append(name)
    return tuple(names)


@dataclass(frozen=True)
class CandidateEvent:
    """A prediction-market event from the pool."""
    id: str
    title: str
    slug: Optional[str] = None
    description: Optional[str] = None
    tags: tuple = ()
    liquidity: Optional[float] = None
    volume: Optional[float] = None
    end_date: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, record: dict) -> "CandidateEvent":
        """
        Build from a Gamma API event record.

        Raises:
            ValueError: record is not a dict or lacks an id or title
        """
        if not isinstance(record, dict):
            raise ValueError("event record must be a dict")
        event_id = record.get("id")
        title = record.get("title")
        if event_id in (None, "") or not title:
            raise ValueError("event record needs an id and a title")

        return cls(
            id=str(event_id),
            title=str(title),
            slug=record.get("slug") or None,
            description=record.get("description") or None,
            tags=_tag_names(record.get("tags")),
            liquidity=_to_float(record.get("liquidity")),
            volume=_to_float(record.get("volume")),
            end_date=record.get("endDate") or record.get("end_date"),
            url=record.get("url"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "liquidity": self.liquidity,
            "volume": self.volume,
            "endDate": self.end_date,
            "url": self.url,
        }


@dataclass
class ScoredEvent:
    """A candidate event with its relevance score."""
    event: CandidateEvent
    score: float
    match_count: int
    matched_keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            **self.event.to_dict(),
            "score": self.score,
            "match_count": self.match_count,
            "matched_keywords": self.matched_keywords,
        }
