"""
GLM Client - Z.AI models through their OpenAI-compatible endpoint.
"""
from typing import Optional, List

from openai import OpenAI

from .base import LLMClient, LLMResponse, Message


class GLMClient(LLMClient):
    """Chat completions against Z.AI (glm-4.7, glm-4.5-air, ...)."""

    provider = "glm"
    API_BASE = "https://api.z.ai/api/paas/v4/"

    def __init__(
        self,
        api_key: str,
        model: str = "glm-4.7",
        timeout: float = 60.0,
        verify_ssl: bool = True,
        base_url: Optional[str] = None,
    ):
        super().__init__(api_key, model)
        self.timeout = timeout
        self._client = OpenAI(
            api_key=api_key,
            base_url=base_url or self.API_BASE,
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
        # OpenAI-style APIs take the system prompt as the first message
        payload = [{"role": "system", "content": system}] if system else []
        payload += [{"role": m.role, "content": m.content} for m in messages]

        completion = self._client.chat.completions.create(
            model=self.model,
            messages=payload,
            max_tokens=max_tokens,
            temperature=temperature,
        )

        choice = completion.choices[0]
        usage = completion.usage
        return LLMResponse(
            content=choice.message.content or "",
            model=completion.model,
            usage={
                "input_tokens": getattr(usage, "prompt_tokens", 0) or 0,
                "output_tokens": getattr(usage, "completion_tokens", 0) or 0,
            },
            stop_reason=choice.finish_reason,
        )
