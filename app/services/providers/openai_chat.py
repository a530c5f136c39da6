"""OpenAI-compatible chat completions adapter (Groq)."""

from typing import Any

from app.models import ProviderConfig

from .base import ProviderAdapter


class OpenAIChatAdapter(ProviderAdapter):
    """choices[0].message.content 한 조각을 그대로 반환합니다."""

    def build_body(self, prompt: str, config: ProviderConfig) -> dict[str, Any]:
        return {
            "model": config.model,
            "max_tokens": config.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    def extract_text(self, data: Any) -> list[str]:
        content = data["choices"][0]["message"]["content"]
        if not isinstance(content, str):
            raise TypeError(f"message content is {type(content).__name__}, not str")
        return [content] if content else []
