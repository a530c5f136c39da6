"""Anthropic Messages API adapter."""

from typing import Any

from app.models import ProviderConfig

from .base import ProviderAdapter

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicAdapter(ProviderAdapter):
    """content 배열의 text 블록만 모아 이어 붙입니다."""

    def extra_headers(self) -> dict[str, str]:
        return {"anthropic-version": ANTHROPIC_VERSION}

    def build_body(self, prompt: str, config: ProviderConfig) -> dict[str, Any]:
        return {
            "model": config.model,
            "max_tokens": config.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    def extract_text(self, data: Any) -> list[str]:
        return [
            block["text"]
            for block in data["content"]
            if block.get("type") == "text" and isinstance(block.get("text"), str)
        ]
