"""
LLM Client Base - Provider-neutral chat interface used by the re-ranker.

Providers implement `_send` only; prompt wrapping, timing and call logging
live here so every provider reports calls the same way.
"""
import time
from abc import ABC, abstractmethod
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Optional, List, Dict

import httpx
from loguru import logger


# Label attached to call log lines ("event_rerank", ...)
_task_label: ContextVar[Optional[str]] = ContextVar("llm_task", default=None)


def set_llm_context(task_type: Optional[str] = None):
    """Label subsequent LLM calls in this context (None clears the label)."""
    _task_label.set(task_type)


def get_llm_context() -> Dict[str, Optional[str]]:
    return {"task_type": _task_label.get()}


@dataclass
class Message:
    role: str  # "user" or "assistant"
    content: str


@dataclass
class LLMResponse:
    """Text answer of one completion plus its token accounting."""
    content: str
    model: str
    usage: Dict[str, int] = field(default_factory=dict)
    stop_reason: Optional[str] = None
    latency_ms: Optional[int] = None

    @property
    def total_tokens(self) -> int:
        return sum(self.usage.get(k, 0) for k in ("input_tokens", "output_tokens"))


class LLMClient(ABC):
    """
    Base class for chat-completion providers.

    Subclasses either override `chat` entirely (test doubles) or implement
    `_send`, which performs one API request and returns an LLMResponse
    without latency filled in.
    """

    provider = "llm"

    def __init__(self, api_key: str, model: str, enable_logging: bool = True):
        self.api_key = api_key
        self.model = model
        self.enable_logging = enable_logging

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 4096,
        temperature: float = 0.0,
    ) -> LLMResponse:
        """Single-turn completion for `prompt`."""
        return self.chat(
            [Message(role="user", content=prompt)],
            system=system,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    def chat(
        self,
        messages: List[Message],
        system: Optional[str] = None,
        max_tokens: int = 4096,
        temperature: float = 0.0,
    ) -> LLMResponse:
        """
        Multi-turn completion.

        Raises whatever the provider SDK raises; callers decide on fallbacks.
        """
        logger.debug(f"{self.provider} request: model={self.model}, messages={len(messages)}")
        started = time.monotonic()
        try:
            response = self._send(messages, system, max_tokens, temperature)
        except Exception as e:
            logger.error(f"{self.provider} request failed: {e}")
            raise
        response.latency_ms = int((time.monotonic() - started) * 1000)
        self.log_call(response)
        return response

    @abstractmethod
    def _send(
        self,
        messages: List[Message],
        system: Optional[str],
        max_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        ...

    @staticmethod
    def _http_client(verify_ssl: bool, provider: str) -> Optional[httpx.Client]:
        """Custom transport only when SSL verification is turned off."""
        if verify_ssl:
            return None
        logger.warning(f"SSL verification disabled for {provider} client")
        return httpx.Client(verify=False)

    def log_call(self, response: LLMResponse) -> None:
        if not self.enable_logging:
            return
        task_type = get_llm_context().get("task_type") or "unknown"
        logger.debug(
            f"LLM call ({task_type}): model={response.model}, "
            f"tokens={response.total_tokens}, latency={response.latency_ms}ms"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model})"
