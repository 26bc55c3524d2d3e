"""
Shared fixtures for the Trend Radar test suite.
"""
from datetime import datetime, timezone
from typing import List, Optional

import pytest

from llm import LLMClient, LLMResponse, Message
from processor.config import build_matching_config
from processor.scorer import CandidateEvent


EVENT_URL = "https://polymarket.com/event"


class FakeLLMClient(LLMClient):
    """LLM client returning a canned answer (or raising) and recording prompts."""

    provider = "fake"

    def __init__(self, content: str = "", error: Optional[Exception] = None):
        super().__init__(api_key="test-key", model="fake-model", enable_logging=False)
        self.content = content
        self.error = error
        self.calls: list = []

    def _send(self, messages: List[Message], system, max_tokens, temperature) -> LLMResponse:
        self.calls.append({"messages": messages, "system": system, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=self.model)


@pytest.fixture
def config():
    """Matching tables with the default event URL."""
    return build_matching_config(event_url_base=EVENT_URL)


@pytest.fixture
def make_event():
    """Factory for CandidateEvent with sensible defaults."""
    def _make(
        event_id: str,
        title: str,
        description: Optional[str] = None,
        tags=(),
        liquidity: Optional[float] = None,
        volume: Optional[float] = None,
        slug: Optional[str] = None,
    ) -> CandidateEvent:
        return CandidateEvent(
            id=event_id,
            title=title,
            slug=slug,
            description=description,
            tags=tuple(tags),
            liquidity=liquidity,
            volume=volume,
        )
    return _make


@pytest.fixture
def nhl_event(make_event):
    return make_event(
        "101",
        "Will the Rangers win the Stanley Cup?",
        description="NHL 2025 playoffs winner market",
        liquidity=25000,
        slug="rangers-stanley-cup",
    )


@pytest.fixture
def valorant_event(make_event):
    return make_event(
        "102",
        "Valorant Champions 2025 winner",
        description="Esports tournament final",
        liquidity=90000,
        slug="valorant-champions",
    )


@pytest.fixture
def tsmc_event(make_event):
    return make_event(
        "201",
        "Will TSMC start Arizona production in 2025?",
        description="Taiwan Semiconductor Manufacturing Company fab timeline",
        liquidity=15000,
        slug="tsmc-arizona",
    )


@pytest.fixture
def fed_event(make_event):
    return make_event(
        "202",
        "Fed decision in March?",
        description="Federal Reserve interest rates outcome",
        liquidity=500000,
        slug="fed-march",
    )


@pytest.fixture
def fake_llm():
    return FakeLLMClient


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
