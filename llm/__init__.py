"""
LLM Module - Chat clients for the optional semantic re-rank.

    from llm import get_client

    client = get_client()               # provider, key and model from settings
    answer = client.generate("...").content

Providers: "anthropic" (Claude) and "glm" (Z.AI, OpenAI-compatible).
"""
from typing import NamedTuple, Optional, Type

from config import settings
from .base import LLMClient, LLMResponse, Message, set_llm_context
from .anthropic_client import AnthropicClient
from .glm import GLMClient


class Provider(NamedTuple):
    client_class: Type[LLMClient]
    default_model: str
    key_setting: str


PROVIDERS = {
    "anthropic": Provider(AnthropicClient, "claude-3-haiku-20240307", "ANTHROPIC_API_KEY"),
    "glm": Provider(GLMClient, "glm-4.7", "GLM_API_KEY"),
}


def _provider_name(provider: Optional[str]) -> str:
    return (provider or settings.LLM_PROVIDER or "anthropic").lower()


def has_api_key(provider: Optional[str] = None) -> bool:
    """True when settings hold a key for the provider (default: LLM_PROVIDER)."""
    entry = PROVIDERS.get(_provider_name(provider))
    return entry is not None and bool(getattr(settings, entry.key_setting, ""))


def get_client(
    provider: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    verify_ssl: Optional[bool] = None,
) -> LLMClient:
    """
    Build a client; anything not passed comes from settings.

    Raises:
        ValueError: unknown provider or empty API key
    """
    name = _provider_name(provider)
    entry = PROVIDERS.get(name)
    if entry is None:
        raise ValueError(f"Unknown LLM provider: {name}. Available: {sorted(PROVIDERS)}")

    if api_key is None:
        api_key = getattr(settings, entry.key_setting, "")
    if not api_key:
        raise ValueError(f"API key required for provider: {name} (set {entry.key_setting})")

    return entry.client_class(
        api_key=api_key,
        model=model or settings.LLM_MODEL or entry.default_model,
        verify_ssl=settings.LLM_VERIFY_SSL if verify_ssl is None else verify_ssl,
    )


__all__ = [
    "get_client",
    "has_api_key",
    "set_llm_context",
    "PROVIDERS",
    "LLMClient",
    "LLMResponse",
    "Message",
    "AnthropicClient",
    "GLMClient",
]
