"""
Anthropic Client - Claude via the official anthropic SDK.
"""
from typing import Optional, List

from anthropic import Anthropic

from .base import LLMClient, LLMResponse, Message


class AnthropicClient(LLMClient):
    """Claude client for the Messages API."""

    provider = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-haiku-20240307",
        timeout: float = 60.0,
        verify_ssl: bool = True
    ):
        super().__init__(api_key, model)
        self.timeout = timeout
        self._client = Anthropic(
            api_key=api_key,
            timeout=timeout,
            http_client=self._http_client(verify_ssl, self.provider),
        )

    def _send(
        self,
        messages: List[Message],
        system: Optional[str],
        max_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        kwargs = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if system:
            kwargs["system"] = system

        response = self._client.messages.create(**kwargs)

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )
        return LLMResponse(
            content=text,
            model=response.model,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            stop_reason=response.stop_reason,
        )
