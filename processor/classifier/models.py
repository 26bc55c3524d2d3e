"""
Data models for the Classifier module.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassifiedKeywords:
    """A keyword list split into trend-specific and category keywords."""
    trend_keywords: list[str] = field(default_factory=list)
    category_keywords: list[str] = field(default_factory=list)

    @property
    def has_trend_keywords(self) -> bool:
        return bool(self.trend_keywords)

    def to_dict(self) -> dict:
        return {
            "trend_keywords": list(self.trend_keywords),
            "category_keywords": list(self.category_keywords),
        }


@dataclass(frozen=True)
class DetectedType:
    """Sport or category inferred from a keyword list."""
    kind: str   # 'sport' or 'category'
    value: str

    @property
    def is_sport(self) -> bool:
        return self.kind == "sport"

    def __str__(self) -> str:
        return f"{self.kind}:{self.value}"
